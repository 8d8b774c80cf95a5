from dataclasses import dataclass, field


@dataclass(eq=False)
class LutInstance:
    """
    A LUT cell instantiation found in a netlist.

    Attributes
    ----------
    name : str
        Instance name, exactly as written (escaped names keep the backslash).
    inputs : list[str]
        Distinct input nets in the order they were first connected.
    consumed : bool
        Set once the instance has been placed into a pair.
    """

    name: str
    inputs: list[str] = field(default_factory=list)
    consumed: bool = False

    def add_input(self, net: str) -> bool:
        """Record an input net unless it is blank or already present.

        The net is trimmed of surrounding whitespace first. Comparison is plain
        string equality, so ``bus[3]`` and ``bus[ 3]`` are different nets.

        Returns
        -------
        bool
            True if the net was added.
        """
        net = net.strip()
        if not net or net in self.inputs:
            return False
        self.inputs.append(net)
        return True

    def consume(self) -> None:
        """Mark the instance as paired.

        Raises
        ------
        ValueError
            If the instance has already been paired.
        """
        if self.consumed:
            raise ValueError(f"LUT instance {self.name} is already paired")
        self.consumed = True


@dataclass(frozen=True)
class LutPair:
    """Two instances packed together, with their positions in the netlist."""

    first: LutInstance
    second: LutInstance
    first_index: int
    second_index: int

    @property
    def names(self) -> tuple[str, str]:
        return self.first.name, self.second.name
