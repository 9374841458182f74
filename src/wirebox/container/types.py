"""Container types and enums."""

from enum import Enum


class WiringMode(Enum):
    """How strictly the wiring engine treats unresolvable bean references.

    Bean definitions store and expose the value; only the wiring engine
    interprets it.
    """

    DEFAULT = "default"
    NONE = "none"
    STRICT = "strict"
    OPTIONAL = "optional"
    AUTOWIRE = "autowire"


class InitMethodInvocationStrategy(Enum):
    """When an init method runs relative to the wiring of its bean."""

    POST_CONSTRUCT = "post_construct"
    POST_DEFINE = "post_define"
    POST_INITIALIZE = "post_initialize"
