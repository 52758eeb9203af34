# models/user_prefs.py

"""
User preferences kept alongside the model: window geometry and the address book save location.
"""

from __future__ import annotations

from typing import Any

DEFAULT_WINDOW_WIDTH = 740.0
DEFAULT_WINDOW_HEIGHT = 600.0
DEFAULT_ADDRESS_BOOK_FILE_PATH = "data/tutorbook.json"


class GuiSettings:

    def __init__(
        self,
        window_width: float = DEFAULT_WINDOW_WIDTH,
        window_height: float = DEFAULT_WINDOW_HEIGHT,
        window_x: int | None = None,
        window_y: int | None = None,
    ):
        self._window_width = GuiSettings.validate_dimension_input(window_width)
        self._window_height = GuiSettings.validate_dimension_input(window_height)
        self._window_x = window_x
        self._window_y = window_y

    @property
    def window_width(self) -> float:
        return self._window_width

    @property
    def window_height(self) -> float:
        return self._window_height

    @property
    def window_coordinates(self) -> tuple[int, int] | None:
        if self._window_x is None or self._window_y is None:
            return None
        return (self._window_x, self._window_y)

    def to_dict(self) -> dict:
        return {
            "window_width": self._window_width,
            "window_height": self._window_height,
            "window_x": self._window_x,
            "window_y": self._window_y,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GuiSettings:
        return cls(
            window_width=data.get("window_width", DEFAULT_WINDOW_WIDTH),
            window_height=data.get("window_height", DEFAULT_WINDOW_HEIGHT),
            window_x=data.get("window_x"),
            window_y=data.get("window_y"),
        )

    def __repr__(self) -> str:
        return f"GuiSettings({self._window_width}, {self._window_height}, {self.window_coordinates})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GuiSettings):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def validate_dimension_input(value: Any) -> float:
        try:
            value = float(value)

        except (TypeError, ValueError):
            raise TypeError("Invalid input. Window dimensions must be numbers.")

        if value <= 0:
            raise ValueError("Invalid input. Window dimensions must be positive.")

        return value


class UserPrefs:

    def __init__(
        self,
        gui_settings: GuiSettings | None = None,
        address_book_file_path: str = DEFAULT_ADDRESS_BOOK_FILE_PATH,
    ):
        self._gui_settings = gui_settings or GuiSettings()
        self._address_book_file_path = address_book_file_path

    # === properties ===

    @property
    def gui_settings(self) -> GuiSettings:
        return self._gui_settings

    @gui_settings.setter
    def gui_settings(self, gui_settings: GuiSettings) -> None:
        self._gui_settings = gui_settings

    @property
    def address_book_file_path(self) -> str:
        return self._address_book_file_path

    @address_book_file_path.setter
    def address_book_file_path(self, path: str) -> None:
        self._address_book_file_path = path

    def reset_data(self, new_prefs: UserPrefs) -> None:
        self._gui_settings = new_prefs.gui_settings
        self._address_book_file_path = new_prefs.address_book_file_path

    def copy(self) -> UserPrefs:
        return UserPrefs(self._gui_settings, self._address_book_file_path)

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "gui_settings": self._gui_settings.to_dict(),
            "address_book_file_path": self._address_book_file_path,
        }

    @classmethod
    def from_dict(cls, data: dict) -> UserPrefs:
        return cls(
            gui_settings=GuiSettings.from_dict(data.get("gui_settings", {})),
            address_book_file_path=data.get(
                "address_book_file_path", DEFAULT_ADDRESS_BOOK_FILE_PATH
            ),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"UserPrefs({self._gui_settings!r}, {self._address_book_file_path})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserPrefs):
            return NotImplemented
        return (
            self._gui_settings == other._gui_settings
            and self._address_book_file_path == other._address_book_file_path
        )
