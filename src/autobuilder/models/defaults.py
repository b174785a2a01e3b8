"""
Default values shared by the configuration and the orchestration components.
"""


class TimeoutConstants:
    """
    Centralized timing configuration.
    """
    # Seconds between two scans of the watched tree
    POLL_INTERVAL = 0.4

    # Seconds a previous application process gets to exit before SIGKILL
    TERMINATION_GRACE_PERIOD = 1.0


class BuildDefaults:
    """Fixed parts of the build invocation and change detection."""
    BUILD_PROGRAM = ("go", "build")
    OUTPUT_FLAG = "-o"
    TRACKED_EXTENSION = ".go"
    HIDDEN_PREFIX = "."
