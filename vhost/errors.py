"""Errors raised while provisioning a virtual host."""


class ProvisionError(Exception):
    """Base class for every failure that aborts a setup run."""


class NotElevatedError(ProvisionError):
    """The tool was started without root privileges."""


class ValidationError(ProvisionError):
    """Operator input is malformed."""


class CollisionError(ValidationError):
    """The project name or hostname is already registered."""


class InstallationError(ProvisionError):
    """A system package could not be installed."""


class CloneError(ProvisionError):
    """The git checkout failed."""


class PermissionSetupError(ProvisionError):
    """Ownership, mode or ACL changes on the project failed."""


class ConfigValidationError(ProvisionError):
    """Apache rejected its configuration after the new site was written."""
