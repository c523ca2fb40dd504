class CodecError(ValueError):
    """Base class for every failure raised by the chain codec."""


class EmptyInputError(CodecError):
    pass


class InsufficientSymbolsError(CodecError):
    pass


class MalformedTreeError(CodecError):
    pass


class MalformedContainerError(CodecError):
    pass


class TruncatedBitstreamError(CodecError, EOFError):
    pass


class UnknownSymbolError(CodecError):
    pass
