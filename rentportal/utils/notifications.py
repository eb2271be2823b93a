"""
Applicant notification hook.

Mail delivery is not wired up: the default notifier writes what would be sent
to the log. Notifier failures are logged and never break the request that
triggered them.
"""
import logging

logger = logging.getLogger(__name__)


class ApplicationNotifier:
    """Interface for side effects of the application lifecycle."""

    def application_submitted(self, application) -> None:
        pass

    def application_approved(self, application) -> None:
        """Provision the tenant account and send credentials."""

    def application_rejected(self, application) -> None:
        pass


class LoggingNotifier(ApplicationNotifier):
    def application_submitted(self, application) -> None:
        logger.info("[EMAIL - NOT CONFIGURED] To: %s | Subject: Application received | Application %s",
                    application.applicant_email, application.id)

    def application_approved(self, application) -> None:
        logger.info("[EMAIL - NOT CONFIGURED] To: %s | Subject: Application approved | Application %s",
                    application.applicant_email, application.id)
        logger.info("Tenant account provisioning is not implemented; application %s left as approved",
                    application.id)

    def application_rejected(self, application) -> None:
        logger.info("[EMAIL - NOT CONFIGURED] To: %s | Subject: Application update | Application %s",
                    application.applicant_email, application.id)


def notify(notifier, event: str, application) -> bool:
    """Call ``notifier.<event>(application)``; returns False if it failed."""
    try:
        getattr(notifier, event)(application)
        return True
    except Exception as e:
        logger.error("Notifier %s failed for application %s: %s", event, application.id, e)
        return False
