from .arithmetic import gcd, mod_inverse, mod_inverse_egcd, valid_keys
from .cipher import Direction, Step, TransformResult, decrypt, encrypt, transform
from .keys import InvalidKeyError, KeyCheck, KeyStatus, validate_key
from .mapping import MappingEntry, build_mapping
