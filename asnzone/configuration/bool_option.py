from asnzone.configuration import Option


class BoolOption(Option):
    """
    Boolean configuration option
    """
    true_values = ["yes", "1", "true"]

    def convert(self, value):
        """ Environment variables enable the option with yes, 1 or true

        :param value: given value
        :return: bool if value was a string, otherwise value unchanged
        """
        if isinstance(value, str):
            return value.lower() in self.true_values
        return value

    def validate(self, value) -> bool:
        """ Validate that this value is a boolean

        :param value: given value
        :return: True if value is a boolean otherwise False
        :rtype: bool
        """
        if not isinstance(value, bool):
            self.lgr.error("Expected true or false for option %s"
                           " but %s was given", self.name, value)
            return False

        return True
