"""
Tests for activity_notification app.

This package contains test modules for:
- test_naming.py: Inflection helpers and controller names
- test_options.py: create_options and ignore_path
- test_routing.py: NotificationRouter route declaration and URL patterns
- test_targets.py: Target model lookup and subscription capability
- test_controllers.py: Controller lookup from settings
- test_views.py: Request dispatch through generated URLs
- test_commands.py: show_notification_routes management command

Usage:
    pytest activity_notification/tests/
    pytest activity_notification/tests/test_routing.py
"""
