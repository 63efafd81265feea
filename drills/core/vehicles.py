"""Vehicle Hierarchy — Vehicle describes make and year, Car adds a model.

Invariants:
    - Attributes are private and read-only (exposed through properties)
    - get_info() format: "Make: {make} Year: {year}"
    - get_model() format: "Model: {model}"
"""


class Vehicle:
    """A vehicle with a make and a model year."""

    def __init__(self, make: str, year: int):
        self._make = make
        self._year = year

    @property
    def make(self) -> str:
        return self._make

    @property
    def year(self) -> int:
        return self._year

    def get_info(self) -> str:
        return f"Make: {self._make} Year: {self._year}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(make={self._make!r}, year={self._year!r})"


class Car(Vehicle):
    """Vehicle with a model name."""

    def __init__(self, make: str, year: int, model: str):
        super().__init__(make, year)
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    def get_model(self) -> str:
        return f"Model: {self._model}"

    def __repr__(self) -> str:
        return (
            f"Car(make={self.make!r}, year={self.year!r}, "
            f"model={self._model!r})"
        )
