"""Composite: files, shortcuts and folders treated alike."""

from abc import ABC, abstractmethod
from typing import List


class FileSystemComponent(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def show_details(self) -> None: ...

    @abstractmethod
    def delete(self) -> None: ...


class File(FileSystemComponent):
    def show_details(self) -> None:
        print(f"File: {self.name}")

    def delete(self) -> None:
        print(f"Deleting file: {self.name}")


class Shortcut(FileSystemComponent):
    def show_details(self) -> None:
        print(f"Shortcut: {self.name}")

    def delete(self) -> None:
        print(f"Deleting shortcut: {self.name}")


class Folder(FileSystemComponent):
    def __init__(self, name: str):
        super().__init__(name)
        self.components: List[FileSystemComponent] = []

    def add_component(self, component: FileSystemComponent) -> None:
        self.components.append(component)

    def remove_component(self, component: FileSystemComponent) -> None:
        self.components.remove(component)

    def show_details(self) -> None:
        print(f"Folder: {self.name}")
        for component in self.components:
            component.show_details()

    def delete(self) -> None:
        print(f"Deleting folder: {self.name}")
        for component in self.components:
            component.delete()


def main() -> None:
    main_folder = Folder("MainFolder")
    sub_folder = Folder("SubFolder")

    main_folder.add_component(File("Document.docx"))
    main_folder.add_component(sub_folder)
    sub_folder.add_component(File("Picture.png"))
    sub_folder.add_component(Shortcut("Shortcut to Document.docx"))

    print("Showing file structure:")
    main_folder.show_details()

    print("\nDeleting file structure:")
    main_folder.delete()
