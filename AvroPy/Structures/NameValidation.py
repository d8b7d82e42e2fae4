from typeguard import typechecked

from AvroPy.Structures.NameErrors import InvalidNameError
from AvroPy.Structures.Name import split_namespace

def is_invalid_first_character(ch : str) -> bool:
    return not (('A' <= ch <= 'Z') or ('a' <= ch <= 'z') or ch == '_')

def is_invalid_other_character(ch : str) -> bool:
    if '0' <= ch <= '9':
        return False
    return is_invalid_first_character(ch)

@typechecked
def check_name(candidate : str) -> None:
    """ Raises InvalidNameError for the first rule the candidate breaks. """
    if len(candidate) == 0:
        raise InvalidNameError("not be empty", candidate)
    if is_invalid_first_character(candidate[0]):
        raise InvalidNameError("start with [A-Za-z_]", candidate)
    if any(is_invalid_other_character(ch) for ch in candidate[1:]):
        raise InvalidNameError("have second and remaining characters contain only [A-Za-z0-9_]", candidate)

@typechecked
def check_local_name(candidate : str) -> None:
    """
    Checks only the segment after the final separator. An embedded namespace
    is not validated at all, matching the Java implementation rather than the
    letter of the naming rules ("a namespace is a dot-separated sequence of
    such names").
    """
    _, local = split_namespace(candidate)
    try:
        check_name(local)
    except InvalidNameError as e:
        # report against the full literal
        raise InvalidNameError(e.reason, candidate) from None

__all__ = ['is_invalid_first_character', 'is_invalid_other_character', 'check_name', 'check_local_name']
