"""Solutions for the 2025 puzzles, days 1 to 5, and their parse error."""