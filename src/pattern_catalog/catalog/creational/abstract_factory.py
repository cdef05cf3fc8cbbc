"""Abstract factory: families of platform-styled widgets."""

from abc import ABC, abstractmethod
from enum import Enum

from ...core.exceptions import UnsupportedPlatformError


class OsType(str, Enum):
    WINDOWS = "windows"
    MAC = "mac"
    LINUX = "linux"


class Button(ABC):
    @abstractmethod
    def paint(self) -> str: ...


class Checkbox(ABC):
    @abstractmethod
    def paint(self) -> str: ...


class WindowsButton(Button):
    def paint(self) -> str:
        return "Rendering a Windows-styled button."


class WindowsCheckbox(Checkbox):
    def paint(self) -> str:
        return "Rendering a Windows-styled checkbox."


class MacButton(Button):
    def paint(self) -> str:
        return "Rendering a MacOS-styled button."


class MacCheckbox(Checkbox):
    def paint(self) -> str:
        return "Rendering a MacOS-styled checkbox."


class GUIFactory(ABC):
    """Creates one matching family of widgets."""

    @abstractmethod
    def create_button(self) -> Button: ...

    @abstractmethod
    def create_checkbox(self) -> Checkbox: ...


class WindowsFactory(GUIFactory):
    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


class MacFactory(GUIFactory):
    def create_button(self) -> Button:
        return MacButton()

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox()


class Application:
    """Client code that only knows the abstract factory."""

    def __init__(self, factory: GUIFactory):
        self.button = factory.create_button()
        self.checkbox = factory.create_checkbox()

    def paint(self) -> list[str]:
        lines = [self.button.paint(), self.checkbox.paint()]
        for line in lines:
            print(line)
        return lines


def factory_for_os(os_name: str) -> GUIFactory:
    """Pick the widget factory for an OS name (case-insensitive).

    Raises:
        UnsupportedPlatformError: For Linux (no widget family yet) or any
            unrecognised name.
    """
    try:
        os_type = OsType(os_name.lower())
    except ValueError:
        raise UnsupportedPlatformError(f"Invalid os: {os_name!r}") from None

    if os_type is OsType.WINDOWS:
        return WindowsFactory()
    if os_type is OsType.MAC:
        return MacFactory()
    raise UnsupportedPlatformError(f"Widgets not implemented for os: {os_type.value}")


def main(os_name: str = OsType.WINDOWS.value) -> None:
    app = Application(factory_for_os(os_name))
    app.paint()
