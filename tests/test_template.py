"""
Tests for the sandboxed template environment

Validates:
- Output escaping and raw output
- Conditionals, loops and the loop binding
- Expressions, filters and undefined names
- Syntax errors carry line numbers
- No access to private attributes and no calls into view data
- Includes load through the environment's loader
"""
import pytest
from jinja2 import DictLoader
from markupsafe import Markup

from laraview.exceptions import TemplateRuntimeException, TemplateSyntaxException
from laraview.template import Template, create_environment


def render(source, **bindings):
    return Template.from_string(source, name='test').render(bindings)


class User:
    def __init__(self, name, admin=False):
        self.name = name
        self.admin = admin
        self._secret = 'hidden'

    def delete(self):
        raise AssertionError("templates must not call methods")


class TestOutput:

    def test_literal_text(self):
        assert render('Hello world') == 'Hello world'

    def test_escaped_output(self):
        assert render('{{ name }}', name='<b>Fred</b>') == '&lt;b&gt;Fred&lt;/b&gt;'

    def test_raw_output(self):
        assert render('{{ name|safe }}', name='<b>Fred</b>') == '<b>Fred</b>'

    def test_markup_not_double_escaped(self):
        assert render('{{ body }}', body=Markup('<p>hi</p>')) == '<p>hi</p>'

    def test_none_renders_empty(self):
        assert render('[{{ value }}]', value=None) == '[]'

    def test_undefined_renders_empty(self):
        assert render('[{{ missing }}][{{ missing.deep[0] }}]') == '[][]'

    def test_comment_is_dropped(self):
        assert render('a{# note #}b') == 'ab'

    def test_trailing_newline_is_kept(self):
        assert render('line\n') == 'line\n'

    def test_result_is_markup(self):
        assert isinstance(render('x'), Markup)


class TestExpressions:

    def test_attribute_and_key_access(self):
        data = {'user': User('Fred'), 'post': {'title': 'Hi'}}

        assert render('{{ user.name }} {{ post.title }} {{ post["title"] }}', **data) == 'Fred Hi Hi'

    def test_index_access(self):
        assert render('{{ items[1] }}{{ items.0 }}', items=['a', 'b']) == 'ba'

    def test_private_attribute_is_undefined(self):
        assert render('[{{ user._secret }}]', user=User('Fred')) == '[]'

    def test_methods_of_data_are_not_callable(self):
        with pytest.raises(TemplateRuntimeException) as exc_info:
            render('{{ user.delete() }}', user=User('Fred'))

        assert exc_info.value.template == 'test'

    def test_environment_helpers_are_callable(self):
        assert render('{% for i in range(3) %}{{ i }}{% endfor %}') == '012'

    def test_literals_and_arithmetic(self):
        assert render('{{ 1 + 2 }} {{ "a" + "b" }} {{ 5 - count }}', count=2) == '3 ab 3'

    def test_string_concatenation_with_number(self):
        assert render('{{ "n=" ~ n }}', n=4) == 'n=4'

    def test_string_escape_sequences(self):
        assert render('{{ "a\\tb" }}|{{ \'it\\\'s\' }}') == 'a\tb|it&#39;s'

    def test_filters(self):
        source = '{{ name|upper }} {{ name|title }} {{ items|length }} {{ items|join(", ") }}'

        assert render(source, name='fred smith', items=['a', 'b']) == 'FRED SMITH Fred Smith 2 a, b'

    def test_default_filter(self):
        assert render('{{ missing|default("none") }} {{ given|default("none") }}', given='x') == 'none x'

    def test_unknown_filter(self):
        with pytest.raises(TemplateSyntaxException):
            render('{{ name|shout }}', name='x')

    def test_comparisons(self):
        source = '{{ a == 1 }} {{ a != 1 }} {{ a < 2 }} {{ "x" in items }} {{ "z" not in items }}'

        assert render(source, a=1, items=['x']) == 'True False True True True'


class TestUndefined:

    def test_ordering_comparison_is_false(self):
        assert render('{% if count > 0 %}y{% else %}n{% endif %}') == 'n'
        assert render('{% if 0 < count %}y{% else %}n{% endif %}') == 'n'
        assert render('{% if count <= 0 %}y{% else %}n{% endif %}') == 'n'

    def test_arithmetic_stays_undefined(self):
        assert render('[{{ missing + 1 }}][{{ 1 - missing }}][{{ -missing }}]') == '[][][]'

    def test_equality(self):
        assert render('{{ missing == 0 }} {{ missing != 0 }}') == 'False True'


class TestConditionals:

    def test_if_else(self):
        source = '{% if user.admin %}admin{% else %}guest{% endif %}'

        assert render(source, user=User('Fred', admin=True)) == 'admin'
        assert render(source, user=User('Fred')) == 'guest'

    def test_elif(self):
        source = '{% if n > 10 %}big{% elif n > 5 %}medium{% else %}small{% endif %}'

        assert render(source, n=7) == 'medium'
        assert render(source, n=1) == 'small'

    def test_boolean_operators(self):
        source = '{% if a and not b or c %}yes{% endif %}'

        assert render(source, a=True, b=False, c=False) == 'yes'
        assert render(source, a=True, b=True, c=False) == ''

    def test_undefined_is_falsy(self):
        assert render('{% if missing %}yes{% else %}no{% endif %}') == 'no'

    def test_block_tags_swallow_one_newline(self):
        source = '{% if True %}\nline\n{% endif %}\nafter'

        assert render(source) == 'line\nafter'


class TestLoops:

    def test_for_loop(self):
        assert render('{% for x in items %}<{{ x }}>{% endfor %}', items=[1, 2]) == '<1><2>'

    def test_loop_binding(self):
        source = '{% for x in items %}{{ loop.index }}{% if not loop.last %},{% endif %}{% endfor %}'

        assert render(source, items='abc') == '1,2,3'

    def test_items_filter_over_mapping(self):
        source = '{% for k, v in prices|items %}{{ k }}={{ v }};{% endfor %}'

        assert render(source, prices={'a': 1, 'b': 2}) == 'a=1;b=2;'

    def test_items_filter_over_list(self):
        source = '{% for i, v in items|items %}{{ i }}:{{ v }} {% endfor %}'

        assert render(source, items=['x', 'y']) == '0:x 1:y '

    def test_items_filter_over_undefined(self):
        assert render('{% for k, v in missing|items %}x{% else %}none{% endfor %}') == 'none'

    def test_else_branch(self):
        source = '{% for x in items %}{{ x }}{% else %}nothing{% endfor %}'

        assert render(source, items=[]) == 'nothing'
        assert render(source) == 'nothing'

    def test_loop_variable_does_not_leak(self):
        assert render('{% for x in items %}{% endfor %}[{{ x }}]', items=[1]) == '[]'


class TestSyntaxErrors:

    @pytest.mark.parametrize('source', [
        '{% if x %}never closed',
        '{% for x in items %}never closed',
        '{% endif %}',
        '{% while x %}{% endwhile %}',
        '{{ }}',
        '{{ a + }}',
        '{{ a; b }}',
        '{% if x %}{% else %}{% elif y %}{% endif %}',
    ])
    def test_invalid_templates(self, source):
        with pytest.raises(TemplateSyntaxException):
            Template.from_string(source)

    def test_line_number_reported(self):
        with pytest.raises(TemplateSyntaxException) as exc_info:
            Template.from_string('one\ntwo\n{{ a + }}', name='broken')

        assert exc_info.value.line == 3
        assert exc_info.value.template == 'broken'


class TestInclude:

    @pytest.fixture
    def environment(self):
        return create_environment(DictLoader({
            'partials.footer': '<footer>{{ x }}</footer>',
            'partials.broken': '{% if %}',
        }))

    def test_include_sees_current_bindings(self, environment):
        template = Template.from_string('a{% include "partials.footer" %}b', environment=environment)

        assert template.render({'x': 1}) == 'a<footer>1</footer>b'

    def test_included_output_is_not_escaped_again(self, environment):
        template = Template.from_string('{% include "partials.footer" %}', environment=environment)

        assert template.render({'x': '<i>'}) == '<footer>&lt;i&gt;</footer>'

    def test_syntax_error_in_included_template(self, environment):
        template = Template.from_string('{% include "partials.broken" %}', name='page', environment=environment)

        with pytest.raises(TemplateSyntaxException) as exc_info:
            template.render({})

        assert exc_info.value.template == 'partials.broken'
