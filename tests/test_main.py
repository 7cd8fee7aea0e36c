import copy
import logging

import pytest

from strictmagic._internal.properties import registry
from strictmagic.main import (
    AccessViolationError,
    InvalidEventHandlerContainerError,
    Magic,
    MagicError,
    UndefinedMemberError,
    by_reference,
    has_magic_property,
    magic_class,
    raise_event,
    set_dev_mode,
)


class Person(Magic):
    """
    @property string $someProp
    @property-read int $age
    @property-write string $secret
    @method void greet()
    """

    name: str
    onSave: list

    def __init__(self):
        self._some_prop = "Some value"
        self._age = 42
        self._secret = None
        self.name = "Luke"
        self.onSave = []

    def getSomeProp(self):
        return self._some_prop

    def setSomeProp(self, value):
        self._some_prop = value

    def getAge(self):
        return self._age

    def setAge(self, value):
        self._age = value

    def setSecret(self, value):
        self._secret = value

    def save(self, what):
        self.raise_event("onSave", what)

    @staticmethod
    def create():
        return Person()


class InvokableEventHandler:
    def __init__(self, number, output):
        self.number = number
        self.output = output

    def __call__(self, save):
        self.output.append(f"{save} {self.number}")


def test_virtual_property_read_and_write():
    p = Person()
    assert p.someProp == "Some value"
    p.someProp = "Some other value"
    assert p.someProp == "Some other value"
    assert p._some_prop == "Some other value"


def test_declared_fields_pass_through():
    p = Person()
    assert p.name == "Luke"
    p.name = "Ada"
    assert p.name == "Ada"
    p._anything = 1
    assert p._anything == 1


def test_read_only_property():
    p = Person()
    assert p.age == 42
    with pytest.raises(AccessViolationError) as e:
        p.age = 43
    assert str(e.value) == "Cannot write to a read-only property Person::age."
    assert p.age == 42


def test_write_only_property():
    p = Person()
    p.secret = "hunter2"
    assert p._secret == "hunter2"
    with pytest.raises(AccessViolationError) as e:
        p.secret
    assert str(e.value) == "Cannot read a write-only property Person::secret."


def test_undeclared_read_suggests_property():
    p = Person()
    with pytest.raises(UndefinedMemberError) as e:
        p.someProb
    assert str(e.value) == (
        "Cannot read an undeclared property Person::someProb, did you mean someProp?"
    )
    assert e.value.suggestion == "someProp"
    assert e.value.name == "someProb"
    assert e.value.owner == "Person"
    assert isinstance(e.value, AttributeError)
    assert isinstance(e.value, MagicError)


def test_undeclared_read_suggests_method():
    p = Person()
    with pytest.raises(UndefinedMemberError) as e:
        p.sav("x")
    assert str(e.value) == "Call to undefined method Person::sav(), did you mean save()?"


def test_undeclared_read_without_suggestion():
    p = Person()
    with pytest.raises(UndefinedMemberError) as e:
        p.xyzzy
    assert str(e.value) == "Cannot read an undeclared property Person::xyzzy."
    assert e.value.suggestion is None


def test_hasattr_and_getattr_default():
    p = Person()
    assert hasattr(p, "someProp")
    assert not hasattr(p, "nothing")
    assert getattr(p, "nothing", 1) == 1


def test_undeclared_write():
    p = Person()
    with pytest.raises(UndefinedMemberError) as e:
        p.nmae = "Ada"
    assert str(e.value) == (
        "Cannot write to an undeclared property Person::nmae, did you mean name?"
    )

    with pytest.raises(UndefinedMemberError) as e:
        p.zzz = 1
    assert str(e.value) == "Cannot write to an undeclared property Person::zzz."


def test_fields_must_be_declared():
    class Strict(Magic):
        def __init__(self):
            self.x = 1

    with pytest.raises(UndefinedMemberError):
        Strict()


def test_delete():
    p = Person()
    del p.name
    assert not hasattr(p, "name")

    with pytest.raises(AccessViolationError) as e:
        del p.someProp
    assert str(e.value) == "Cannot unset the property Person::someProp."

    with pytest.raises(UndefinedMemberError) as e:
        del p.nope
    assert str(e.value) == "Cannot unset the property Person::nope."


def test_event_handlers_are_called_in_order():
    p = Person()
    output = []
    p.onSave.append(lambda save: output.append(f"{save} 1"))
    p.onSave.append(lambda save: output.append(f"{save} 2"))
    p.onSave.append(lambda save: output.append(f"{save} 3"))

    p.save("Save")

    assert output == ["Save 1", "Save 2", "Save 3"]


def test_invokable_event_handlers():
    p = Person()
    output = []
    p.onSave = [InvokableEventHandler(i, output) for i in (1, 2, 3)]

    raise_event(p, "onSave", "Save")

    assert output == ["Save 1", "Save 2", "Save 3"]


def test_event_handler_container():
    p = Person()
    p.onSave = None
    p.save("nothing happens")

    p.onSave = (h for h in [lambda save: None])
    p.save("generators are iterable")

    p.onSave = 5
    with pytest.raises(InvalidEventHandlerContainerError) as e:
        p.save("Save")
    assert str(e.value) == "Property Person::onSave must be iterable or None, int given."
    assert isinstance(e.value, TypeError)

    p.onSave = "handler"
    with pytest.raises(InvalidEventHandlerContainerError):
        p.save("Save")


def test_raising_an_unknown_event():
    p = Person()
    with pytest.raises(UndefinedMemberError) as e:
        p.raise_event("greit")
    assert str(e.value) == "Call to undefined method Person::greit(), did you mean greet()?"

    # event shaped but not a field
    with pytest.raises(UndefinedMemberError):
        p.raise_event("onLoad")


def test_undefined_static_method():
    with pytest.raises(UndefinedMemberError) as e:
        Person.crate()
    assert str(e.value) == (
        "Call to undefined static method Person::crate(), did you mean create()?"
    )
    assert isinstance(Person.create(), Person)
    assert not hasattr(Person, "nothing")


def test_has_magic_property():
    p = Person()
    assert has_magic_property(p, "someProp")
    assert has_magic_property(Person, "secret")
    assert not has_magic_property(p, "name")


def test_registry_knows_fields_and_events():
    assert registry.fields(Person) == ("name", "onSave")
    assert registry.is_event_property(Person, "onSave")
    assert not registry.is_event_property(Person, "name")
    assert not registry.is_event_property(Person, "onLoad")


def test_by_reference_getters():
    class Box(Magic):
        """
        @property list $items
        @property list $live
        """

        def __init__(self):
            self._items = [1]

        def getItems(self):
            return self._items

        @by_reference
        def getLive(self):
            return self._items

    b = Box()
    b.items.append(2)
    assert b.items == [1]
    b.live.append(2)
    assert b.items == [1, 2]


def test_subclass_inherits_virtual_properties():
    class Employee(Person):
        """@property-read str $title"""

        def getTitle(self):
            return "Engineer"

    e = Employee()
    assert e.title == "Engineer"
    assert e.someProp == "Some value"
    with pytest.raises(AccessViolationError):
        e.title = "Manager"


def test_magic_class_decorator():
    @magic_class
    class Plain:
        """@property int $value"""

        def __init__(self):
            self._value = 0

        def getValue(self):
            return self._value

        def setValue(self, value):
            self._value = value

    p = Plain()
    p.value = 3
    assert p.value == 3
    with pytest.raises(UndefinedMemberError) as e:
        p.valeu = 4
    assert e.value.suggestion == "value"

    assert magic_class(Plain) is Plain


def test_magic_class_keeps_own_getattr():
    @magic_class
    class Fallback:
        def __getattr__(self, attr):
            return attr.upper()

    assert Fallback().anything == "ANYTHING"


def test_slotted_magic_class():
    class Slotted(Magic):
        __slots__ = ("x", "_y")

        def __init__(self):
            self.x = 1
            self._y = 2

    s = Slotted()
    s.x = 3
    assert s.x == 3
    with pytest.raises(UndefinedMemberError) as e:
        s.z = 1
    assert str(e.value).endswith("Slotted::z, did you mean x?")
    assert not hasattr(s, "__dict__")


def test_copy():
    p = Person()
    p.someProp = "copied"
    q = copy.copy(p)
    assert q.someProp == "copied"


def test_dev_mode_logging(caplog):
    p = Person()
    p.onSave.append(lambda save: None)
    set_dev_mode()
    try:
        with caplog.at_level(logging.DEBUG, logger="strictmagic.dev"):
            p.save("Save")
    finally:
        set_dev_mode(False)
    assert "raising onSave on Person" in caplog.text


def test_extra_method_names_are_suggested():
    class Greeter(Magic):
        __magic_methods__ = ["welcome"]

    with pytest.raises(UndefinedMemberError) as e:
        Greeter().raise_event("welcom")
    assert e.value.suggestion == "welcome"
    assert str(e.value).endswith("Greeter::welcom(), did you mean welcome()?")


def test_unassigned_declared_field():
    class Pending(Magic):
        x: int

    p = Pending()
    with pytest.raises(AttributeError) as e:
        p.x
    assert not isinstance(e.value, UndefinedMemberError)
    assert "undeclared" not in str(e.value)
    assert str(e.value).endswith("Pending::x has not been assigned")
    p.x = 1
    assert p.x == 1


def test_raising_a_method_as_an_event():
    p = Person()
    with pytest.raises(AccessViolationError) as e:
        raise_event(p, "save", "Save")
    assert str(e.value) == "Person::save is a method, not an event field."


def test_virtual_property_read_on_the_class():
    with pytest.raises(AttributeError) as e:
        Person.someProp
    assert not isinstance(e.value, UndefinedMemberError)
    assert "is a virtual property" in str(e.value)
    assert not hasattr(Person, "age")


def test_magic_class_with_abc_base():
    import abc

    @magic_class
    class Shape(abc.ABC):
        """@property-read float $area"""

        @abc.abstractmethod
        def getArea(self):
            pass

    class Square(Shape):
        def __init__(self, side):
            self._side = side

        def getArea(self):
            return self._side**2

    with pytest.raises(TypeError):
        Shape()

    s = Square(3)
    assert s.area == 9
    with pytest.raises(UndefinedMemberError):
        s.side = 4
