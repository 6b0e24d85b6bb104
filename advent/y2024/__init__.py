"""Solutions for the 2024 puzzles: days 1 to 16, 18, 19, 22 and 23."""