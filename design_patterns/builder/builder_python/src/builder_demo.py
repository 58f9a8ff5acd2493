import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

PART_A = 'PartA1'
PART_B = 'PartB1'
PART_C = 'PartC1'

PARTS_PREFIX = 'Product parts: '
PARTS_DELIMITER = ', '


class NoBuilderConfiguredError(RuntimeError):
    pass


class Product1:

    def __init__(self):
        self._parts: List[str] = []

    def add(self, part: str):
        self._parts.append(part)

    @property
    def parts(self) -> Tuple[str, ...]:
        return tuple(self._parts)

    def list_parts(self):
        print(self)

    def __str__(self):
        return "%s%s" % (PARTS_PREFIX, PARTS_DELIMITER.join(self._parts))


# Builder abstraction. Concrete builders must
# implement every construction step declared here.
class Builder(ABC):

    @abstractmethod
    def produce_part_a(self):
        raise NotImplementedError("%s has not implemented method 'produce_part_a'" % type(self).__name__)

    @abstractmethod
    def produce_part_b(self):
        raise NotImplementedError("%s has not implemented method 'produce_part_b'" % type(self).__name__)

    @abstractmethod
    def produce_part_c(self):
        raise NotImplementedError("%s has not implemented method 'produce_part_c'" % type(self).__name__)


class ConcreteBuilder1(Builder):

    def __init__(self):
        self.reset()

    def reset(self):
        logger.debug("%s: starting a new product", type(self).__name__)
        self._product = Product1()

    # Hands the result over and starts a fresh product,
    # so a second call returns an empty one.
    def product(self) -> Product1:
        product = self._product
        self.reset()
        return product

    def produce_part_a(self):
        self._add(PART_A)

    def produce_part_b(self):
        self._add(PART_B)

    def produce_part_c(self):
        self._add(PART_C)

    def _add(self, part: str):
        logger.debug("%s: adding %s", type(self).__name__, part)
        self._product.add(part)


# Runs fixed sequences of construction steps against
# whichever builder is currently assigned.
class Director:

    def __init__(self):
        self.builder: Optional[Builder] = None

    def build_minimal_viable_product(self):
        builder = self._require_builder('minimal viable')
        builder.produce_part_a()

    def build_full_featured_product(self):
        builder = self._require_builder('full featured')
        builder.produce_part_a()
        builder.produce_part_b()
        builder.produce_part_c()

    def _require_builder(self, recipe: str) -> Builder:
        if self.builder is None:
            raise NoBuilderConfiguredError("No builder assigned to the director for the %s product" % recipe)
        logger.debug("Building %s product with %s", recipe, type(self.builder).__name__)
        return self.builder


def main() -> int:
    director = Director()
    builder = ConcreteBuilder1()
    director.builder = builder

    print("Standard basic product: ")
    director.build_minimal_viable_product()
    builder.product().list_parts()
    print()

    print("Standard full featured product: ")
    director.build_full_featured_product()
    builder.product().list_parts()
    print()

    # The builder can also be driven directly, without a director
    print("Custom product: ")
    builder.produce_part_a()
    builder.produce_part_b()
    builder.produce_part_c()
    builder.product().list_parts()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
