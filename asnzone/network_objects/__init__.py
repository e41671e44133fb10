"""
Subpackage for classes that hold information about network objects
"""

from .address_family import AddressFamily
from .prefix_record import PrefixKey, PrefixRecord
from .reverse_domains import reverse_name6, nibble_labels6
