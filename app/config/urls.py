"""
URL configuration for the Django application.

URL Structure:
    /api/v1/users/{user_id}/notifications/            - Notification list (GET)
        open_all/                                     - Open all notifications (POST)
        {id}/                                         - Notification detail (GET, DELETE)
        {id}/move/                                    - Open and redirect (GET)
        {id}/open/                                    - Open notification (POST)
    /api/v1/users/{user_id}/subscriptions/            - Subscription list/create (GET, POST)
        {id}/                                         - Subscription detail (GET, DELETE)
        {id}/subscribe/                               - Subscribe (POST)
        {id}/unsubscribe/                             - Unsubscribe (POST)
        {id}/subscribe_to_email/                      - Enable email (POST)
        {id}/unsubscribe_to_email/                    - Disable email (POST)
        {id}/subscribe_to_optional_target/            - Enable optional target (POST)
        {id}/unsubscribe_to_optional_target/          - Disable optional target (POST)

Controllers are looked up through ACTIVITY_NOTIFICATION["CONTROLLERS"] when
a request arrives. Run `manage.py show_notification_routes` for the full table.
"""

from django.urls import include, path

from activity_notification.routing import NotificationRouter

# =============================================================================
# API v1 Routes
# =============================================================================
router = NotificationRouter()
router.notify_to("users").subscribed_by("users")

urlpatterns = [
    path("api/v1/", include(router.urls)),
]
