import pytest

from tagsmith import html as H


def test_html_tag_class():
    div = H.div(_class='test')
    assert div.attributes.classes == {'test'}
    assert div.to_html() == '<div class="test"></div>'

    div = H.div()
    assert div.to_html() == '<div></div>'


def test_html_singleton_tag_class():
    inp = H.input(_class='test')
    assert inp.attributes.classes == {'test'}
    assert inp.to_html() == '<input class="test" />'

    inp = H.input()
    assert inp.to_html() == '<input />'


def test_html_singleton_tag_children():
    with pytest.raises(TypeError, match='cannot have children'):
        H.br('text')
    with pytest.raises(TypeError, match='cannot have children'):
        H.br()('text')


def test_html_tag_class_getitem():
    div = H.div['b a'](H.span('x'), 'y')
    assert div.to_html() == '<div class="a b"><span>x</span>y</div>'


def test_html_tag_children_call():
    div = H.div()(H.p('a'), H.hr())
    assert div.to_html() == '<div><p>a</p><hr /></div>'


def test_html_tag_keyword_attributes():
    inp = H.input(type='checkbox', checked=True, disabled=False, for_='x', data_id=3, autofocus=None)
    assert inp.to_html() == '<input autofocus checked data-id="3" for="x" type="checkbox" />'


def test_html_tag_value_semantics():
    base = H.div()
    changed = base.add_class('a').custom_attribute('foo').style(color='red')
    assert base.to_html() == '<div></div>'
    assert changed.to_html() == '<div foo style="color: red" class="a"></div>'

    other = changed.custom_attribute('bar')
    assert changed.to_html() == '<div foo style="color: red" class="a"></div>'
    assert other.to_html() == '<div bar foo style="color: red" class="a"></div>'


def test_html_tag_factory():
    btn = H.tag('btn')
    assert btn().to_html() == '<btn></btn>'
    assert issubclass(H.tag('img'), H.SingletonTag)
    assert H.tag('img')().to_html() == '<img />'

    with pytest.raises(ValueError):
        H.tag('')
    with pytest.raises(ValueError):
        H.tag('my tag')


def test_html_tag_opening_tag():
    div = H.div('content').custom_attribute('id', 'main')
    assert div.opening_tag() == '<div id="main">'
    assert H.div().opening_tag() == '<div>'


def test_html_generated_tags():
    for name in H.TAGS:
        tag_cls = getattr(H, name)
        assert tag_cls.tag_name == name
        assert issubclass(tag_cls, H.SingletonTag) == (name in H.SINGLETON_TAGS)
