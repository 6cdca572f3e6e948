from hubtrack_identity.application.context.user_context import UserContext

__all__ = ["UserContext"]
