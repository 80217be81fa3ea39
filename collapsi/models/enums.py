from enum import Enum

BOARD_SIZE = 4
MAX_WILD_DISTANCE = 4


class CardType(str, Enum):
    RED_JOKER = "red-joker"
    BLACK_JOKER = "black-joker"
    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"

    @property
    def is_wild(self) -> bool:
        return self in (CardType.RED_JOKER, CardType.BLACK_JOKER)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def vector(self) -> tuple[int, int]:
        return _VECTORS[self]

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_VECTORS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GameStatus(str, Enum):
    SETUP = "setup"
    PLAYING = "playing"
    ENDED = "ended"


class DistanceKind(str, Enum):
    FIXED = "fixed"
    WILD = "wild"


class WildPhase(str, Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"
    MUST_COMPLETE = "must_complete"


class ErrorKind(str, Enum):
    INPUT_ERROR = "input_error"
    RULE_VIOLATION = "rule_violation"
    STATE_INCONSISTENCY = "state_inconsistency"


class ReasonCode(str, Enum):
    # input errors
    UNKNOWN_CARD_TYPE = "unknown_card_type"
    INVALID_POSITION = "invalid_position"
    EMPTY_PATH = "empty_path"
    PATH_START_MISMATCH = "path_start_mismatch"
    INVALID_SNAPSHOT = "invalid_snapshot"
    MALFORMED_INPUT = "malformed_input"
    # rule violations
    DISTANCE_OUT_OF_RANGE = "distance_out_of_range"
    DISTANCE_MISMATCH = "distance_mismatch"
    PATH_LENGTH_MISMATCH = "path_length_mismatch"
    NOT_ORTHOGONAL = "not_orthogonal"
    REVISIT = "revisit"
    ENDS_ON_START = "ends_on_start"
    ENDS_ON_OCCUPIED = "ends_on_occupied"
    CROSSES_COLLAPSED = "crosses_collapsed"
    CROSSES_OCCUPIED = "crosses_occupied"
    CARD_TYPE_MISMATCH = "card_type_mismatch"
    GAME_NOT_PLAYING = "game_not_playing"
    NOT_YOUR_TURN = "not_your_turn"
    NOT_ON_WILD_CARD = "not_on_wild_card"
    WILD_MOVE_IN_PROGRESS = "wild_move_in_progress"
    NO_ACTIVE_WILD_MOVE = "no_active_wild_move"
    NO_LEGAL_WILD_STEP = "no_legal_wild_step"
    WILD_BUDGET_EXHAUSTED = "wild_budget_exhausted"
    WILD_NO_STEPS_TAKEN = "wild_no_steps_taken"
    # state inconsistencies
    PLAYER_NOT_FOUND = "player_not_found"
    PLAYER_NOT_PLACED = "player_not_placed"
    STALE_STARTING_POSITION = "stale_starting_position"
    DESTINATION_MISSING = "destination_missing"
    EXECUTION_FAILED = "execution_failed"


_INPUT = {
    ReasonCode.UNKNOWN_CARD_TYPE,
    ReasonCode.INVALID_POSITION,
    ReasonCode.EMPTY_PATH,
    ReasonCode.PATH_START_MISMATCH,
    ReasonCode.INVALID_SNAPSHOT,
    ReasonCode.MALFORMED_INPUT,
}

_INCONSISTENCY = {
    ReasonCode.PLAYER_NOT_FOUND,
    ReasonCode.PLAYER_NOT_PLACED,
    ReasonCode.STALE_STARTING_POSITION,
    ReasonCode.DESTINATION_MISSING,
    ReasonCode.EXECUTION_FAILED,
}


def kind_of(code: ReasonCode) -> ErrorKind:
    if code in _INPUT:
        return ErrorKind.INPUT_ERROR
    if code in _INCONSISTENCY:
        return ErrorKind.STATE_INCONSISTENCY
    return ErrorKind.RULE_VIOLATION


class WarningCode(str, Enum):
    OCCUPANT_WITHOUT_PLAYER = "occupant_without_player"
    PLAYER_WITHOUT_OCCUPANT = "player_without_occupant"
    OCCUPANT_ON_COLLAPSED = "occupant_on_collapsed"
    PLAYER_ON_COLLAPSED = "player_on_collapsed"
    PLAYER_ON_MULTIPLE_CELLS = "player_on_multiple_cells"
    PLAYERS_SHARE_CELL = "players_share_cell"
    WILD_OWNER_NOT_CURRENT = "wild_owner_not_current"
    WILD_PATH_DETACHED = "wild_path_detached"
    HISTORY_POSITION_MISMATCH = "history_position_mismatch"
