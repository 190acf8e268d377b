import pytest

from codemark.option import OptionDoc, Target, make_option
from codemark.registry import OptionExistsError, OptionNotFoundError, Registry, merge
from codemark.rtypes import TypeKind, basic


def _opts():
    string = basic(TypeKind.STRING)
    return [
        make_option("codemark:registry:plain", string, None, False, Target.ANY),
        make_option(
            "codemark:registry:doc", string, OptionDoc(desc="some doc"), False, Target.ANY
        ),
    ]


@pytest.mark.parametrize("index", [0, 1])
def test_in_memory_define_and_get(index):
    reg = Registry()
    opt = _opts()[index]
    reg.define(opt)
    assert reg.get(opt.ident) is opt
    assert reg.doc_of(opt.ident) is opt.doc


def test_doc_of_returns_doc():
    reg = Registry()
    opt = _opts()[1]
    reg.define(opt)
    assert reg.doc_of("codemark:registry:doc") == OptionDoc(desc="some doc")


def test_define_duplicate_raises():
    reg = Registry()
    opt = _opts()[0]
    reg.define(opt)
    with pytest.raises(OptionExistsError, match="codemark:registry:plain"):
        reg.define(_opts()[0])


def test_get_missing_raises():
    with pytest.raises(OptionNotFoundError):
        Registry().get("codemark:registry:missing")


def test_doc_of_missing_raises():
    with pytest.raises(OptionNotFoundError):
        Registry().doc_of("codemark:registry:missing")


def test_all_lists_definitions():
    reg = Registry()
    opts = _opts()
    for opt in opts:
        reg.define(opt)
    assert reg.all() == {opt.ident: opt for opt in opts}


def test_merge_combines():
    first, second = Registry(), Registry()
    plain, doc = _opts()
    first.define(plain)
    second.define(doc)
    merged = merge(first, second)
    assert merged.get(plain.ident) is plain
    assert merged.get(doc.ident) is doc
    assert len(merged.all()) == 2


def test_merge_duplicate_raises():
    first, second = Registry(), Registry()
    first.define(_opts()[0])
    second.define(_opts()[0])
    with pytest.raises(OptionExistsError):
        merge(first, second)