class UserStoreError(Exception):
    pass


class InvalidArgument(UserStoreError):
    pass


class UnsupportedOperation(InvalidArgument):
    operation: str

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Operation {operation} not allowed!")


class FileAccessError(UserStoreError):
    pass


class ReadError(UserStoreError):
    pass


class WriteError(UserStoreError):
    pass


class DecodeError(UserStoreError):
    pass


class EncodeError(UserStoreError):
    pass


class NotFound(UserStoreError):
    record_id: str

    def __init__(self, record_id: str):
        self.record_id = record_id
        super().__init__(f"Item with id {record_id} not found")
