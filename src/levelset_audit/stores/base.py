"""Base abstraction for asset stores.

An asset store is one layer of the overlay: something that can say whether
a logical path exists and hand back its bytes. The resolver is written
against this interface only, so audits never touch a concrete filesystem
directly.
"""

from abc import ABC, abstractmethod


class AssetStore(ABC):
    """Abstract base class for all asset stores.

    Implementations map slash-separated logical paths to their own storage
    (a directory, an in-memory table, ...) while adhering to this common
    interface.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether a logical path is present in this store.

        Args:
            path: Logical asset path

        Returns:
            True if the store holds a file at that path
        """
        pass

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """Read the content stored at a logical path.

        Args:
            path: Logical asset path

        Returns:
            Raw file content

        Raises:
            FileNotFoundError: If the path is not present
            OSError: If reading fails
        """
        pass

    @abstractmethod
    def physical_path(self, path: str) -> str:
        """Describe where a logical path lives in this store.

        For directory stores this is the system path of the file. It is
        used for reporting and as the archive source, and is returned
        whether or not the file exists.

        Args:
            path: Logical asset path

        Returns:
            Physical location as a string
        """
        pass

    def describe(self) -> str:
        """Short human-readable location of the store, for reports."""
        return repr(self)
