"""Character, string, memory, tokenizing, linked-list and output helpers used by pipex."""