"""Implementation modules behind the flat ``rendermath`` facade."""
