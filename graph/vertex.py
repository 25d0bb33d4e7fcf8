from typing import Optional


# ---------------------------------------------------------------------------
# Vertex
# ---------------------------------------------------------------------------
class Vertex:
    """
    Immutable identity (id, name), mutable position.

    Attributes:
        id    : Dense 0-based index, equal to the vertex count at creation.
                Doubles as the index into Graph.vertices.
        name  : Human-readable label shown on the canvas.
        x, y  : Canvas coordinates.  Display metadata only — the renderer
                owns layout, the core just keeps the numbers.
    """

    __slots__ = ("id", "name", "x", "y")

    def __init__(self, vertex_id: int, name: Optional[str] = None, x: float = 0.0, y: float = 0.0):
        self.id:   int   = vertex_id
        self.name: str   = name or f"V{vertex_id}"
        self.x:    float = x
        self.y:    float = y

    def move_to(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def as_tuple(self):
        """(id, name, x, y) — the shape the renderer consumes."""
        return (self.id, self.name, self.x, self.y)

    # ------------------------------------------------------------------
    # Serialisation  (session round-trip)
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":   self.id,
            "name": self.name,
            "x":    self.x,
            "y":    self.y,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Vertex":
        return cls(
            vertex_id=int(data["id"]),
            name=data.get("name"),
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Vertex(id={self.id}, name={self.name}, pos=({self.x:.2f},{self.y:.2f}))"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Vertex)
            and self.id == other.id
            and self.name == other.name
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name))
