"""Decorator: stackable transformations on a data stream."""

from abc import ABC, abstractmethod


class DataStream(ABC):
    @abstractmethod
    def write(self, data: str) -> str:
        """Write ``data`` and return what actually reached the sink."""


class FileDataStream(DataStream):
    def write(self, data: str) -> str:
        print(f"Writing data to file: {data}")
        return data


class DataStreamDecorator(DataStream):
    def __init__(self, data_stream: DataStream):
        self.wrapped = data_stream

    def write(self, data: str) -> str:
        return self.wrapped.write(data)


class EncryptionDecorator(DataStreamDecorator):
    def write(self, data: str) -> str:
        return super().write(f"Encrypted({data})")


class CompressionDecorator(DataStreamDecorator):
    def write(self, data: str) -> str:
        return super().write(f"Compressed({data})")


def main() -> None:
    file_stream = FileDataStream()
    encrypted = EncryptionDecorator(file_stream)
    compressed_and_encrypted = CompressionDecorator(encrypted)

    print("Writing with basic data stream:")
    file_stream.write("Sample Data")

    print("\nWriting with encrypted data stream:")
    encrypted.write("Sample Data")

    print("\nWriting with compressed and encrypted data stream:")
    compressed_and_encrypted.write("Sample Data")
