# -*- coding: utf-8 -*-

# Block type whose attributes the tool updates.
LOCALS_BLOCK_TYPE = "locals"

# Inputs, named the way CI actions pass them to a container.
ENV_FILEPATH = "INPUT_FILEPATH"
ENV_VARNAME = "INPUT_VARNAME"
ENV_VALUE = "INPUT_VALUE"

LOG_FORMAT = "%(asctime)s %(name)s => %(message)s"

# Exit codes
EXIT_CODE_OK = 0
EXIT_CODE_FAILURE = 1
EXIT_CODE_FILE_ACCESS = 64
EXIT_CODE_PARSE_ERROR = 65
EXIT_CODE_ATTRIBUTE_NOT_FOUND = 66
EXIT_CODE_SAVE_ERROR = 67

CLI_MAIN_INTRODUCTION = (
    "Update a local value of a Terraform file in place.\n\n"
    "The first attribute with the given name found in a `locals` block is "
    "set to the given string, every other byte of the file is kept as is."
)
CLI_DEBUG_HELP = "Enable debug mode for detailed output."
CLI_FILEPATH_HELP = f"Path of the file to update. Read from {ENV_FILEPATH} when not given."
CLI_VARNAME_HELP = f"Name of the local to update. Read from {ENV_VARNAME} when not given."
CLI_VALUE_HELP = f"New string value of the local. Read from {ENV_VALUE} when not given."
CLI_EXIT_CODE_HELP = "Output standard exit codes. Default: --exit-code"
CLI_ATOMIC_HELP = (
    "Write to a temporary file and rename it over the target instead of "
    "truncating the target and writing into it."
)
