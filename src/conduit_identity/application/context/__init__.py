from conduit_identity.application.context.jwt_context import JwtContext

__all__ = ["JwtContext"]
