from ircline.services.presence_service import PresenceService

__all__ = ["PresenceService"]
