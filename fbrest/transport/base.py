from abc import ABC, abstractmethod


class Transport(ABC):
    @abstractmethod
    def open(self, host: str, port: int) -> bool:
        pass

    @abstractmethod
    def write(self, data: bytes) -> int:
        pass

    @abstractmethod
    def read_line(self) -> bytes:
        """Read up to and including the next b'\\n', or whatever remains once the peer closed."""
        pass

    @abstractmethod
    def in_waiting(self) -> int:
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    @property
    @abstractmethod
    def is_open(self) -> bool:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
