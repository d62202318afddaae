from .display import Display
from typing import Any, Dict, List, Optional


class ResultSink(Display):
    """Collects what a wait publishes for the rest of the pipeline.

    Outputs end up in the task result; notices and info lines are shown as
    they happen and kept so they can be returned too.
    """

    def __init__(self) -> None:
        super().__init__()
        self.outputs: Dict[str, Any] = {}
        self.failure: Optional[str] = None
        self.notices: List[str] = []

    def set_output(self, key: str, value: Any):
        self.vvv(f"Setting output {key}={value}")
        self.outputs[key] = value

    def set_failed(self, message: str):
        self.failure = message

    def notice(self, message: str):
        self.notices.append(message)
        super().notice(message)

    @property
    def failed(self) -> bool:
        return self.failure is not None
