from .password_hashing import WerkzeugPasswordHasher
from .tokens import SecretsTokenGenerator

__all__ = ["SecretsTokenGenerator", "WerkzeugPasswordHasher"]
