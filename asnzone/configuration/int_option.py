from asnzone.configuration import Option


class IntOption(Option):
    """
    Integer configuration option, validation holds inclusive (min, max)
    """

    def convert(self, value):
        """ Convert textual value from environment or cmdline

        :param value: given value
        :return: int if value is a decimal number, otherwise value unchanged
        """
        if isinstance(value, str) and value.strip().isdigit():
            return int(value)
        return value

    def validate(self, value) -> bool:
        """ Validate that the value is an integer within bounds

        :param value: given value
        :return: True if value is an integer within bounds otherwise False
        :rtype: bool
        """
        if not isinstance(value, int) or isinstance(value, bool):
            self.lgr.error("Expected integer for option %s"
                           " but %s was given", self.name, value)
            return False
        low, high = self.validation
        if (low is not None and value < low) or (high is not None
                                                 and value > high):
            self.lgr.error("Value of %s must be within %s and %s"
                           " but %s was given", self.name, low, high, value)
            return False
        return True
