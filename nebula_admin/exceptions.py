class NebulaException(Exception):
    """Helps the HTTP exception compute flows."""

    status_code = 500
    message = 'Internal Server Error'

    def __init__(self, message: str=None, status_code: int=None):
        if status_code:
            self.status_code = status_code
        if message:
            self.message = message
        super().__init__(self.message)


class ResourceConfigurationError(NebulaException):
    """The resource is not usable as declared, usually its model can't be resolved."""


class ResourceNotFoundException(NebulaException):
    """One of the resources wasn't found."""
    status_code = 404


class FilterNotFoundError(NebulaException):
    status_code = 404

    def __init__(self, name: str):
        super().__init__(f'Filter {name} not found.')
        self.name = name


class DuplicateFieldError(NebulaException):

    def __init__(self, name: str):
        super().__init__(f'Field "{name}" is declared more than once.')
        self.name = name
