from src.player_rank.questions import Position

# A session needs at least this many players (self-rating precondition)
MIN_PLAYERS = 4

# Role pairs offered to a player when rating themself
SELF_RATING_ROLE_PAIRS = (
    (Position.ATTACK, Position.DEFENSE),
    (Position.ATTACK, Position.GOALIE),
    (Position.DEFENSE, Position.GOALIE),
)

# Role pairs that anchor the three position scales together
ANCHOR_ROLE_PAIRS = (
    (Position.ATTACK, Position.DEFENSE),
    (Position.ATTACK, Position.GOALIE),
)

# Responses of 0 are clamped to this before taking logs
RESPONSE_FLOOR = 1e-3
