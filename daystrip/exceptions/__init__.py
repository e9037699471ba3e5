from daystrip.exceptions.errors import DaystripError, FieldDescriptorError, OptionValidationError

__all__ = ["DaystripError", "FieldDescriptorError", "OptionValidationError"]
