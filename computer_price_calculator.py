from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional


# ==================== Enums ====================

class ComponentType(Enum):
    """Concrete computer part kinds, valued by display name"""
    COMPUTER = "Computer"
    MEMORY = "Memory"
    GRAPHIC_CARD = "Graphic Card"
    CPU = "CPU"
    KEYBOARD = "Keyboard"
    MONITOR = "Monitor"
    RAM = "RAM"
    ROM = "ROM"
    EXTERNAL_DISK = "External Disk"
    GPU = "GPU"
    GRAPHIC_MEMORY = "Graphic Memory"


CURRENCY = "AED"


# ==================== Component Interface ====================

class ComputerComponent(ABC):
    """Abstract base class for all computer parts"""

    def __init__(self, name: str):
        self._name = name
        self._parent: Optional['CompositeComponent'] = None

    @abstractmethod
    def accept(self, visitor: 'ComputerVisitor') -> None:
        """Dispatch to the visitor handler for this concrete kind"""
        pass

    @abstractmethod
    def get_price(self) -> int:
        pass

    @abstractmethod
    def get_type(self) -> ComponentType:
        pass

    @abstractmethod
    def is_composite(self) -> bool:
        pass

    def get_name(self) -> str:
        return self._name

    def get_parent(self) -> Optional['CompositeComponent']:
        return self._parent

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._name}, {self.get_price()} {CURRENCY})"


# ==================== Visitor Interface ====================

class ComputerVisitor(ABC):
    """
    One handler per visitable component kind.

    A subclass missing any handler cannot be instantiated, so every
    kind is always handled.
    """

    @abstractmethod
    def visit_memory(self, memory: 'Memory') -> None:
        pass

    @abstractmethod
    def visit_ram(self, ram: 'Ram') -> None:
        pass

    @abstractmethod
    def visit_rom(self, rom: 'Rom') -> None:
        pass

    @abstractmethod
    def visit_external_disk(self, external_disk: 'ExternalDisk') -> None:
        pass

    @abstractmethod
    def visit_cpu(self, cpu: 'Cpu') -> None:
        pass

    @abstractmethod
    def visit_keyboard(self, keyboard: 'Keyboard') -> None:
        pass

    @abstractmethod
    def visit_monitor(self, monitor: 'Monitor') -> None:
        pass

    @abstractmethod
    def visit_graphic_card(self, graphic_card: 'GraphicCard') -> None:
        pass

    @abstractmethod
    def visit_gpu(self, gpu: 'Gpu') -> None:
        pass

    @abstractmethod
    def visit_graphic_memory(self, graphic_memory: 'GraphicMemory') -> None:
        pass


# ==================== Composite Components ====================

class CompositeComponent(ComputerComponent):
    """A part assembled from an ordered list of sub-parts"""

    def __init__(self, name: str):
        super().__init__(name)
        self._children: List[ComputerComponent] = []

    def is_composite(self) -> bool:
        return True

    def add(self, component: ComputerComponent) -> None:
        """Append a child part; each part belongs to at most one assembly"""
        if not isinstance(component, ComputerComponent):
            raise TypeError(f"Expected a ComputerComponent, got {type(component).__name__}")
        if component is self:
            raise ValueError(f"Cannot add {self._name} to itself")
        if component.get_parent() is not None:
            raise ValueError(
                f"{component.get_name()} already belongs to {component.get_parent().get_name()}"
            )
        if isinstance(component, CompositeComponent) and component._contains(self):
            raise ValueError(f"Adding {component.get_name()} would create a cycle")

        self._children.append(component)
        component._parent = self

    def get_children(self) -> List[ComputerComponent]:
        return list(self._children)

    def get_price(self) -> int:
        """Sum of the children's prices; assemblies have no price of their own"""
        total = 0
        for child in self._children:
            total += child.get_price()
        return total

    def _contains(self, component: ComputerComponent) -> bool:
        for child in self._children:
            if child is component:
                return True
            if isinstance(child, CompositeComponent) and child._contains(component):
                return True
        return False

    def _accept_children(self, visitor: 'ComputerVisitor') -> None:
        for child in self._children:
            child.accept(visitor)


class Computer(CompositeComponent):
    """Root assembly. It has no handler of its own and only forwards to its parts."""

    def __init__(self):
        super().__init__(ComponentType.COMPUTER.value)

    def get_type(self) -> ComponentType:
        return ComponentType.COMPUTER

    def accept(self, visitor: ComputerVisitor) -> None:
        self._accept_children(visitor)


class Memory(CompositeComponent):
    def __init__(self):
        super().__init__(ComponentType.MEMORY.value)

    def get_type(self) -> ComponentType:
        return ComponentType.MEMORY

    def accept(self, visitor: ComputerVisitor) -> None:
        visitor.visit_memory(self)
        self._accept_children(visitor)


class GraphicCard(CompositeComponent):
    def __init__(self):
        super().__init__(ComponentType.GRAPHIC_CARD.value)

    def get_type(self) -> ComponentType:
        return ComponentType.GRAPHIC_CARD

    def accept(self, visitor: ComputerVisitor) -> None:
        visitor.visit_graphic_card(self)
        self._accept_children(visitor)


# ==================== Leaf Components ====================

class LeafComponent(ComputerComponent):
    """An atomic part with a fixed price"""

    def __init__(self, name: str, price: int):
        if isinstance(price, bool) or not isinstance(price, int):
            raise TypeError(f"Price of {name} must be an integer, got {price!r}")
        if price < 0:
            raise ValueError(f"Price of {name} cannot be negative: {price}")
        super().__init__(name)
        self._price = price

    def is_composite(self) -> bool:
        return False

    def get_price(self) -> int:
        return self._price


class Cpu(LeafComponent):
    def __init__(self, price: int):
        super().__init__(ComponentType.CPU.value, price)

    def get_type(self) -> ComponentType:
        return ComponentType.CPU

    def accept(self, visitor: ComputerVisitor) -> None:
        visitor.visit_cpu(self)


class Keyboard(LeafComponent):
    def __init__(self, price: int):
        super().__init__(ComponentType.KEYBOARD.value, price)

    def get_type(self) -> ComponentType:
        return ComponentType.KEYBOARD

    def accept(self, visitor: ComputerVisitor) -> None:
        visitor.visit_keyboard(self)


class Monitor(LeafComponent):
    def __init__(self, price: int):
        super().__init__(ComponentType.MONITOR.value, price)

    def get_type(self) -> ComponentType:
        return ComponentType.MONITOR

    def accept(self, visitor: ComputerVisitor) -> None:
        visitor.visit_monitor(self)


class Ram(LeafComponent):
    def __init__(self, price: int):
        super().__init__(ComponentType.RAM.value, price)

    def get_type(self) -> ComponentType:
        return ComponentType.RAM

    def accept(self, visitor: ComputerVisitor) -> None:
        visitor.visit_ram(self)


class Rom(LeafComponent):
    def __init__(self, price: int):
        super().__init__(ComponentType.ROM.value, price)

    def get_type(self) -> ComponentType:
        return ComponentType.ROM

    def accept(self, visitor: ComputerVisitor) -> None:
        visitor.visit_rom(self)


class ExternalDisk(LeafComponent):
    def __init__(self, price: int):
        super().__init__(ComponentType.EXTERNAL_DISK.value, price)

    def get_type(self) -> ComponentType:
        return ComponentType.EXTERNAL_DISK

    def accept(self, visitor: ComputerVisitor) -> None:
        visitor.visit_external_disk(self)


class Gpu(LeafComponent):
    def __init__(self, price: int):
        super().__init__(ComponentType.GPU.value, price)

    def get_type(self) -> ComponentType:
        return ComponentType.GPU

    def accept(self, visitor: ComputerVisitor) -> None:
        visitor.visit_gpu(self)


class GraphicMemory(LeafComponent):
    def __init__(self, price: int):
        super().__init__(ComponentType.GRAPHIC_MEMORY.value, price)

    def get_type(self) -> ComponentType:
        return ComponentType.GRAPHIC_MEMORY

    def accept(self, visitor: ComputerVisitor) -> None:
        visitor.visit_graphic_memory(self)


# ==================== Visitors ====================

class MemoryPriceVisitor(ComputerVisitor):
    """Totals the price of RAM, ROM and external disks"""

    def __init__(self):
        self._total_memory_price = 0
        self._visited_components: List[str] = []

    def get_total_memory_price(self) -> int:
        return self._total_memory_price

    def get_visited_components(self) -> List[str]:
        return list(self._visited_components)

    def _record(self, component: LeafComponent) -> None:
        price = component.get_price()
        self._total_memory_price += price
        self._visited_components.append(f"{component.get_name()}: {price} {CURRENCY}")

    def visit_ram(self, ram: Ram) -> None:
        self._record(ram)

    def visit_rom(self, rom: Rom) -> None:
        self._record(rom)

    def visit_external_disk(self, external_disk: ExternalDisk) -> None:
        self._record(external_disk)

    # Not memory-class parts
    def visit_memory(self, memory: Memory) -> None:
        pass

    def visit_cpu(self, cpu: Cpu) -> None:
        pass

    def visit_keyboard(self, keyboard: Keyboard) -> None:
        pass

    def visit_monitor(self, monitor: Monitor) -> None:
        pass

    def visit_graphic_card(self, graphic_card: GraphicCard) -> None:
        pass

    def visit_gpu(self, gpu: Gpu) -> None:
        pass

    def visit_graphic_memory(self, graphic_memory: GraphicMemory) -> None:
        pass


def calculate_memory_price(component: ComputerComponent) -> MemoryPriceVisitor:
    """Run a fresh MemoryPriceVisitor over the tree and return it"""
    visitor = MemoryPriceVisitor()
    component.accept(visitor)
    return visitor


# ==================== Setup & Report ====================

def build_computer() -> Computer:
    """Assemble the reference computer with its fixed prices"""
    computer = Computer()

    computer.add(Cpu(400))
    computer.add(Keyboard(60))
    computer.add(Monitor(120))

    memory = Memory()
    memory.add(Ram(140))
    memory.add(Rom(90))
    memory.add(ExternalDisk(150))
    computer.add(memory)

    graphic_card = GraphicCard()
    graphic_card.add(Gpu(200))
    graphic_card.add(GraphicMemory(100))
    computer.add(graphic_card)

    return computer


def format_report(visitor: MemoryPriceVisitor) -> List[str]:
    lines = [
        "Computer Architecture Price Calculator",
        "=====================================",
        "",
        "Memory Components Prices:",
        "------------------------",
    ]
    lines.extend(visitor.get_visited_components())
    lines.append("")
    lines.append(
        f"Total price of memory components: {visitor.get_total_memory_price()} {CURRENCY}"
    )
    return lines


def main():
    computer = build_computer()
    visitor = calculate_memory_price(computer)

    for line in format_report(visitor):
        print(line)


if __name__ == "__main__":
    main()


# Key Design Decisions
# Design Patterns Used:

# Composite Pattern - Computer hierarchy:

# ComputerComponent (Component)
# Computer, Memory, GraphicCard (Composite)
# Cpu, Keyboard, Monitor, Ram, Rom, ExternalDisk, Gpu, GraphicMemory (Leaf)


# Visitor Pattern - Price queries:

# ComputerVisitor declares one handler per kind
# accept() on each concrete class picks the handler (double dispatch)
# Computer forwards to its parts without a handler of its own
# Memory and GraphicCard call their handler before their parts
