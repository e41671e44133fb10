import ipaddress

from asnzone.configuration import Option


class IpOption(Option):
    """
    Ip address configuration option, validation may hold required version
    """
    def validate(self, value) -> bool:
        """ Validate that the value is an ip address of required version

        :param value: Value that should be validated
        :return: True if value is a string of an ip address, otherwise False
        :rtype: bool
        """
        try:
            address = ipaddress.ip_address(value)
        except ValueError:
            self.lgr.error("Value of %s must be an ip address "
                           "%s was given", self.name, value)
            return False
        if self.validation is not None and address.version != self.validation:
            self.lgr.error("Value of %s must be an IPv%s address "
                           "%s was given", self.name, self.validation, value)
            return False
        return True
