class AprioriMinerError(Exception):
    """Base class of every error raised by aprioriminer."""


class ConfigurationError(AprioriMinerError, ValueError):
    """
    :param
    @option - the name of the rejected configuration option
    @value - the offending value
    @reason - why the value was rejected
    """
    def __init__(self, option, value, reason):
        self.option = option
        self.value = value
        self.reason = reason
        super(ConfigurationError, self).__init__("invalid %s=%r: %s" % (option, value, reason))


class TransactionFormatError(AprioriMinerError, ValueError):
    def __init__(self, source, line_no, detail):
        self.source = source
        self.line_no = line_no
        self.detail = detail
        if line_no is None:
            message = "%s: %s" % (source, detail)
        else:
            message = "%s, line %d: %s" % (source, line_no, detail)
        super(TransactionFormatError, self).__init__(message)


# raised when the frequent-set table does not hold a subset that mining must have retained
class InvariantViolation(AprioriMinerError, RuntimeError):
    pass
