# CSV column layouts
PLAYER_COLUMNS = ["name", "goalie", "avail1", "avail2"]
QUESTION_COLUMNS = ["player1", "pos1", "player2", "pos2", "response"]
RANK_COLUMNS = ["name", "atk", "def", "goalie"]

TRUE_VALUES = {"true", "yes", "y", "1"}
FALSE_VALUES = {"false", "no", "n", "0", ""}

# Interactive commands
SKIP_COMMAND = "s"
NEXT_SECTION_COMMAND = "n"
QUIT_COMMAND = "q"
