class FbrestException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class TransportError(FbrestException):
    pass


class TlsError(TransportError):
    pass


class ProtocolError(FbrestException):
    pass


class RegistryError(FbrestException):
    pass


class RegistryFullError(RegistryError):
    pass


class CLIError(FbrestException):
    pass


class ConfigError(CLIError):
    pass


class ValidationError(CLIError):
    pass
