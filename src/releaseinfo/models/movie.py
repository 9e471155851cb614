from dataclasses import dataclass


@dataclass(frozen=True)
class MovieRecord:
    """Entry of the movie catalog"""
    id: int
    title: str
    year: int

    def to_dict(self):
        """Convert movie record to dictionary"""
        return {
            'id': self.id,
            'title': self.title,
            'year': self.year
        }

    def __str__(self):
        return f"{self.title} ({self.year})"
