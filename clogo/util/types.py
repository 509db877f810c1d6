import numbers
from . import geometry


def wrap_number_like(value):
    """ Try to use the value as a real number.

    Instances of numbers.Real are passed through unchanged,
    float is returned if a number supports conversion to float, otherwise an exception
    is raised. """
    if isinstance(value, numbers.Real):
        return value
    else:
        try:
            return float(value)
        except (TypeError, ValueError):
            raise TypeError(
                "Value must be instance of numbers.Real or support conversion to float to be number-like"
            )


def wrap_vector_like(value):
    """ Try to use value as a 2D vector.
    Vector-like is either instance of Vector2 or its subclass, or an iterable with
    exactly two elements. """

    if isinstance(value, geometry.Vector2):
        return value

    try:
        it = iter(value)
    except TypeError:
        raise TypeError("Value must be iterable to be vector-like")

    wrapped = (wrap_number_like(x) for x in it)

    try:
        x = next(wrapped)
        y = next(wrapped)
    except StopIteration:
        raise TypeError("Value must have two items to be vector-like")

    try:
        next(it)
        # We don't want to try converting the item after the last one to not
        # hide the "too long" message with potentional "not a number" message
    except StopIteration:
        pass
    else:
        raise TypeError("Value must have at most two items to be vector-like")

    return geometry.Vector2(x, y)
