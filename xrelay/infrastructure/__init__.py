"""Infrastructure layer - adapters for paramiko, termios and sockets."""
