from typing import Optional, Set

# None means no filtering was applied; an empty set means nothing matched.
MatchResult = Optional[Set[str]]
