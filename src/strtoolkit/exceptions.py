__docformat__ = 'google'

__all__ = [
    'InvalidArgumentError'
]

class InvalidArgumentError(TypeError):
    """
    Raised when an argument is of a type the function cannot work with.

    Args:
        name: Name of the offending parameter
        expected: Human readable description of the accepted types
        received: The value that was passed
    """
    def __init__(self, name: str, expected: str, received):
        self.name = name
        self.received_type = type(received).__name__
        super().__init__(f'{name} must be {expected}. Got {self.received_type}')
