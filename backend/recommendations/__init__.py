"""
Menu recommendation package.

Responsibilities:
- Load the menu catalog and vendor directory.
- Match, filter or sample menu items for a query or meal type.
- Fall back to LLM ranking or random picks when nothing matches.
- Annotate results with vendor names and distance from the user.
"""
