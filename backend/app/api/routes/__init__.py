
from . import visitor_box

__all__ = [
	"visitor_box",
]
