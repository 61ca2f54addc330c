"""Exception hierarchy for remote-url."""


class RemoteURLError(Exception):
    """Base exception for all remote-url errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(RemoteURLError):
    """Invalid or inconsistent resolver configuration."""


class UnknownServiceError(ConfigurationError):
    """The hosting service has no URL template."""

    def __init__(self, service: str, known: list[str] | None = None) -> None:
        known = sorted(known or [])
        super().__init__(
            f"Unknown hosting service: {service!r} (known: {', '.join(known)})",
            details={"service": service, "known": known},
        )
        self.service = service


class RemoteResolutionError(RemoteURLError):
    """The remote URL or current branch could not be determined."""


class RemoteURLParseError(RemoteResolutionError):
    """A remote URL string could not be parsed."""

    def __init__(self, url: str, reason: str = "unrecognized format") -> None:
        super().__init__(
            f"Cannot parse remote URL {url!r}: {reason}",
            details={"url": url, "reason": reason},
        )
        self.url = url


class UnsupportedVCSError(RemoteURLError):
    """The operation is not implemented for this VCS."""

    def __init__(self, vcs: str, operation: str) -> None:
        super().__init__(
            f"Unsupported VCS {vcs!r} for {operation}",
            details={"vcs": vcs, "operation": operation},
        )
        self.vcs = vcs


class VCSProbeError(RemoteURLError):
    """A VCS command failed, timed out, or its binary is missing."""
