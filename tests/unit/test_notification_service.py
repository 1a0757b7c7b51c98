"""Unit tests for the notification center"""

from resumeai.models.notification import NotificationLevel
from resumeai.services.notification_service import NotificationCenter


class TestNotificationCenter:
    """Test cases for NotificationCenter"""

    def test_levels_and_order(self):
        center = NotificationCenter()

        center.success("uploaded")
        center.error("failed")
        center.info("fyi")

        listed = center.list()
        assert [n.message for n in listed] == ["fyi", "failed", "uploaded"]
        assert [n.level for n in listed] == [
            NotificationLevel.INFO,
            NotificationLevel.ERROR,
            NotificationLevel.SUCCESS,
        ]
        assert [n.id for n in listed] == [3, 2, 1]

    def test_history_is_bounded(self):
        center = NotificationCenter(limit=3)

        for i in range(5):
            center.info(f"message {i}")

        assert [n.message for n in center.list()] == ["message 4", "message 3", "message 2"]

    def test_errors_are_logged_as_warnings(self, caplog):
        center = NotificationCenter()

        center.error("Please upload a resume first.")

        assert any(
            record.levelname == "WARNING" and "Please upload a resume first." in record.getMessage()
            for record in caplog.records
        )

    def test_clear(self):
        center = NotificationCenter()
        center.success("done")
        center.clear()
        assert center.list() == []
