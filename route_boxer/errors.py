# region Error Taxonomy
class RouteBoxerError(ValueError):
    """Base class for every failure raised by route_boxer."""


class EmptyRouteError(RouteBoxerError):
    pass


class InvalidRangeError(RouteBoxerError):
    pass


class InvalidPointError(RouteBoxerError):
    pass


class LatitudeOutOfRangeError(RouteBoxerError):
    pass


class DegenerateSegmentError(RouteBoxerError):
    """A due east/west segment reached the latitude-crossing computation."""


class GridWrapError(RouteBoxerError):
    """Longitude grid lines wrapped all the way around the globe."""


class GridTooLargeError(RouteBoxerError):
    pass


class EmptyBoundsError(RouteBoxerError):
    pass
# endregion
