SHELL_NAME = "tinysh"
VERSION = "0.1.0"

STATEMENT_SEP = ";"
PIPE_SEP = "|"
WHITESPACE = " \t"

KW_IF = "if"
KW_THEN = "then"
KW_ELSE = "else"
KW_FI = "fi"
KW_EXIT = "exit"
CONTROL_KEYWORDS = {KW_IF, KW_THEN, KW_ELSE, KW_FI}

CONTINUATION_PROMPT = "> "

STATUS_OK = 0
STATUS_FAILURE = 1
STATUS_SYNTAX_ERROR = 2
STATUS_NOT_EXECUTABLE = 126
STATUS_NOT_FOUND = 127
