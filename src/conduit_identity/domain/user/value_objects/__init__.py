from conduit_identity.domain.user.value_objects.email import Email
from conduit_identity.domain.user.value_objects.unique_field import UniqueField

__all__ = [
    "Email",
    "UniqueField",
]
