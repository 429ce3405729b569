class PathNotFoundError(FileNotFoundError):
    """
    Exception raised when the root path handed to the tree builder does not exist.

    This is the only fatal error of tree generation. Failures below the root (entries
    that vanish or cannot be stat'd, directories that cannot be listed) are absorbed
    during traversal and never surface as exceptions.

    Attributes:
        path (str): The root path as it was given by the caller.

    Example:
        >>> error = PathNotFoundError("/does/not/exist")
        >>> str(error)
        'Path does not exist: /does/not/exist'
        >>> isinstance(error, FileNotFoundError)
        True
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the missing path.

        Args:
            path (str): The path that could not be found.
        """
        self.path = path
        self.message = f"Path does not exist: {path}"
        super().__init__(self.message)
