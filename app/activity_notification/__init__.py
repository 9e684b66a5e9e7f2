"""
Notification and subscription routes for Django.

This app provides:
- NotificationRouter with notify_to / subscribed_by route declaration
- Option resolution (create_options) and the only/except path filter
- Lazy controller lookup for DRF ViewSets (CONTROLLERS setting)
- SubscriptionTarget protocol for targets with subscription management
- show_notification_routes management command

Usage:
    # urls.py
    from django.urls import include, path

    from activity_notification.routing import NotificationRouter

    router = NotificationRouter()
    router.notify_to("users", with_devise="users", with_subscription=True)

    urlpatterns = [
        path("api/v1/", include(router.urls)),
    ]
"""
