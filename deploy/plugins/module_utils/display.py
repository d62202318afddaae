try:
    from ansible.utils.display import Display as OrigDisplay
    HAS_DISPLAY = True
except ImportError:
    HAS_DISPLAY = False


class Display:
    """Logs through Ansible's Display when it is importable, and stays
    silent otherwise."""

    def __init__(self) -> None:
        self.display = OrigDisplay() if HAS_DISPLAY else None

    def info(self, msg):
        if self.display:
            self.display.display(msg)

    def notice(self, msg):
        if self.display:
            self.display.warning(msg, formatted=False)

    def v(self, msg):
        if self.display:
            self.display.verbose(msg, caplevel=0)

    def vvv(self, msg):
        if self.display:
            self.display.verbose(msg, caplevel=2)
