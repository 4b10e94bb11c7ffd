# Application Layer
# =================
# Use-case orchestration with no business rules of its own:
# - fanout: detached, concurrent delivery of a submission to every sink

from .fanout import FanoutCoordinator, build_sinks

__all__ = ["FanoutCoordinator", "build_sinks"]
