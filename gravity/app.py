"""The Gravity program: file roots, input handling and the entry point."""

from __future__ import annotations

import sys
from typing import Optional

from gravity import file_manager
from gravity.callback import Callback, EventData, EventDispatcher, EventType, VirtualKey
from gravity.core import Program, execute
from gravity.file_manager import FileManagerRegistry


class Gravity(Program, Callback):
    """The application program: sets up file roots and quits on Escape."""

    def __init__(
        self,
        dispatcher: Optional[EventDispatcher] = None,
        file_managers: Optional[FileManagerRegistry] = None,
    ) -> None:
        super().__init__(dispatcher=dispatcher)
        self._file_managers = file_managers if file_managers is not None else file_manager.registry

    def init(self, params: str) -> bool:
        self._init_file_managers()
        self._init_callback()
        return True

    def update(self) -> None:
        """Advance one frame."""
        super().update()

    def draw(self) -> None:
        """Render one frame."""
        super().draw()

    def on_resize(self) -> None:
        """Note a resize or move of the window."""
        super().on_resize()

    def on_close(self) -> None:
        """Note the close request and drop this program's input handlers."""
        super().on_close()
        self.clear()

    def _init_file_managers(self) -> None:
        self._file_managers.make("write")
        self._file_managers.make("base", "../../Source/Resources/Files")

    def _init_callback(self) -> None:
        def quit_on_escape(data: EventData) -> None:
            if data.key == VirtualKey.ESCAPE:
                raise SystemExit(0)

        self.add(EventType.PRESS_KEY, quit_on_escape)


def main(argv: Optional[list[str]] = None) -> int:
    """Run Gravity; the first argument is handed to the program as its parameters."""
    args = sys.argv if argv is None else argv
    params = args[0] if args else ""
    return execute(Gravity(), params)


if __name__ == "__main__":
    raise SystemExit(main())