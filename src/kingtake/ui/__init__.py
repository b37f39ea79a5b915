"""Qt front end. Importing this package requires PyQt6."""
