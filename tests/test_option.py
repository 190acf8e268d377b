import pytest

from codemark.option import (
    InvalidOptionError,
    Option,
    OptionDoc,
    Target,
    domain_of,
    make_option,
    option_of,
    resource_of,
    validate_option,
)
from codemark.rtypes import TypeKind, basic


STRING = basic(TypeKind.STRING)


def test_make_option_keeps_fields():
    doc = OptionDoc(desc="some doc")
    opt = make_option("codemark:registry:doc", STRING, doc, True, Target.ANY, Target.FIELD)
    assert opt.ident == "codemark:registry:doc"
    assert opt.rtype == STRING
    assert opt.doc is doc
    assert opt.is_unique is True
    assert opt.targets == (Target.ANY, Target.FIELD)


@pytest.mark.parametrize(
    "ident",
    ["+codemark:registry:plain", "codemark:registry", "codemark:registry_:plain", "codemark:registry:plain."],
)
def test_make_option_invalid_ident(ident):
    with pytest.raises(InvalidOptionError):
        make_option(ident, STRING, None, False, Target.ANY)


def test_make_option_requires_type():
    with pytest.raises(InvalidOptionError, match="type cannot be nil"):
        make_option("codemark:registry:plain", None, None, False, Target.ANY)


def test_make_option_requires_targets():
    with pytest.raises(InvalidOptionError, match="no targets defined"):
        make_option("codemark:registry:plain", STRING, None, False)


def test_validate_option_direct():
    with pytest.raises(InvalidOptionError):
        validate_option(Option(ident="codemark:registry:plain", rtype=STRING))


def test_segments():
    ident = "codemark:registry:plain"
    assert domain_of(ident) == "codemark"
    assert resource_of(ident) == "registry"
    assert option_of(ident) == "plain"


@pytest.mark.parametrize("ident", ["codemark:registry", "a:b:c:d", "plain"])
def test_segments_wrong_count(ident):
    assert domain_of(ident) == ""
    assert resource_of(ident) == ""
    assert option_of(ident) == ""