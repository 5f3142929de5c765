"""User messages and prompts for passman."""

# Success messages
SUCCESS_ADDED = "Account added successfully!"
SUCCESS_DELETED = "Account deleted successfully!"
SUCCESS_COPIED = "Password copied to clipboard!"

# Error messages
ERROR_NO_COMMAND = "Please provide a valid command."
ERROR_UNKNOWN_COMMAND = "Unknown command: {command}. Use 'help' to see available commands."
ERROR_NOT_FOUND = "No account found with name '{name}'"
ERROR_GENERIC = "Error: {error}"
ERROR_CANCELLED = "Operation cancelled"

# Info messages
INFO_NO_ACCOUNTS = "No accounts found in the database."
INFO_NOTHING_TO_DELETE = "No accounts available to delete."
INFO_PASSWORD = "Password for account '{account}': {password}"

# Prompts
PROMPT_ACCOUNT = "Enter account:"
PROMPT_USERNAME = "Enter username:"
PROMPT_EMAIL = "Enter email:"
PROMPT_GENERATE = "Generate password? [y/n]:"
PROMPT_PASSWORD = "Please enter your password:"
PROMPT_GET_ACCOUNT = "Enter your account's name:"
PROMPT_COPY = "Do you want to copy the password to clipboard? [y/n]"
PROMPT_DELETE_ACCOUNT = "Which account you want to delete?"

# Help header
HELP_TITLE = "Password Manager CLI"
