from smsgate.utils.logging import setup_logging
from smsgate.utils.redact import redact_secrets

__all__ = ["setup_logging", "redact_secrets"]
