from src.genwun.enums.type import Type, Effectiveness
from src.genwun.enums.stat import Stat
from src.genwun.enums.status import Condition
from src.genwun.enums.move_effect import MoveEffectKind
