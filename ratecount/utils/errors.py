# ratecount/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided config (counter directives, config files).
    Should NOT print traceback.
    """


class CounterConfigError(UserInputError):
    """计数器配置错误：构造阶段发现，程序无法继续。"""

    def __init__(self, directive: str, message: str):
        self.directive = directive
        super().__init__(message)


class UnknownCounterOption(CounterConfigError):
    def __init__(self, directive: str):
        super().__init__(directive, f"Unknown counter option: {directive}")


class MissingOptionValue(CounterConfigError):
    def __init__(self, directive: str):
        super().__init__(directive, f"Option {directive} needs an argument")


class InvalidOptionValue(CounterConfigError):
    def __init__(self, directive: str, value):
        self.value = value
        super().__init__(
            directive, f"Option {directive} got an invalid value: {value!r}"
        )
