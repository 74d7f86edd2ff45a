"""
Blade Compiler
Translates Blade-dialect templates into plain-dialect (Jinja) template source

Supported Blade syntax:
    {{ $name }}                     escaped echo
    {!! $html !!}                   raw echo
    {{-- comment --}}
    @if($a) @elseif($b) @else @endif
    @unless($a) @endunless
    @empty($a) @endempty
    @foreach($users as $user) @endforeach
    @foreach($users as $id => $user) @endforeach
    @forelse($users as $user) @empty @endforelse
    @include('partials.footer')

Unknown @words (e-mail addresses, decorators in inline scripts) are left as-is.
"""
import re
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple, Union

from laraview.defaults import DEFAULT_TEMPLATE_ENCODING
from laraview.exceptions import TemplateSyntaxException
from laraview.logging import getLogger

logger = getLogger(__name__)

COMMENT_REGEX = re.compile(r'\{\{--(.*?)--\}\}', re.DOTALL)
RAW_ECHO_REGEX = re.compile(r'\{!!\s*(.+?)\s*!!\}', re.DOTALL)
ECHO_REGEX = re.compile(r'\{\{\s*(.+?)\s*\}\}', re.DOTALL)
DIRECTIVE_REGEX = re.compile(r'\B@(\w+)')
VARIABLE_REGEX = re.compile(r'\$([A-Za-z_]\w*)')
NULL_REGEX = re.compile(r'(?<!\$)\bnull\b', re.IGNORECASE)
STRING_REGEX = re.compile(r"'(?:[^'\\]|\\.)*'|\"(?:[^\"\\]|\\.)*\"")
FOREACH_REGEX = re.compile(r'^(?P<iterable>.+?)\s+as\s+(?:\$(?P<key>\w+)\s*=>\s*)?\$(?P<value>\w+)$', re.DOTALL)


class BladeCompiler:
    """
    Compiles Blade templates to plain-dialect source

    Example:
        compiler = BladeCompiler()
        compiler.compile_string('@if($user){{ $user->name }}@endif')
        # '{% if user %}{{ user.name }}{% endif %}'
    """

    def __init__(self, encoding: str = DEFAULT_TEMPLATE_ENCODING):
        self.encoding = encoding
        self.directives: Dict[str, Callable[[Optional[str]], str]] = {
            'if': lambda args: f'{{% if {self._require(args, "if")} %}}',
            'elseif': lambda args: f'{{% elif {self._require(args, "elseif")} %}}',
            'else': lambda args: '{% else %}',
            'endif': lambda args: '{% endif %}',
            'unless': lambda args: f'{{% if not ({self._require(args, "unless")}) %}}',
            'endunless': lambda args: '{% endif %}',
            'empty': self._compile_empty,
            'endempty': lambda args: '{% endif %}',
            'foreach': lambda args: self._compile_foreach(args, 'foreach'),
            'endforeach': lambda args: '{% endfor %}',
            'forelse': lambda args: self._compile_foreach(args, 'forelse'),
            'endforelse': lambda args: '{% endfor %}',
            'include': self._compile_include,
        }

    def compile(self, path: Union[str, Path]) -> str:
        """Read a Blade template from disk and return plain-dialect source"""
        logger.debug("Compiling Blade template", extra={'template_path': str(path)})
        source = Path(path).read_text(encoding=self.encoding)
        return self.compile_string(source)

    def compile_string(self, source: str) -> str:
        source = COMMENT_REGEX.sub(lambda m: '{#' + m.group(1) + '#}', source)
        source = ECHO_REGEX.sub(lambda m: '{{ ' + self.expression(m.group(1)) + ' }}', source)
        source = RAW_ECHO_REGEX.sub(lambda m: '{{ (' + self.expression(m.group(1)) + ')|safe }}', source)
        return self._compile_directives(source)

    def expression(self, php: str) -> str:
        """Translate a Blade (PHP-flavoured) expression to the template expression language"""
        parts = []
        pos = 0
        for match in STRING_REGEX.finditer(php):
            parts.append(self._translate_code(php[pos:match.start()]))
            parts.append(match.group(0))
            pos = match.end()
        parts.append(self._translate_code(php[pos:]))
        return ''.join(parts).strip()

    @staticmethod
    def _translate_code(code: str) -> str:
        code = NULL_REGEX.sub('none', code)
        code = VARIABLE_REGEX.sub(r'\1', code)
        code = code.replace('->', '.')
        code = code.replace('===', '==').replace('!==', '!=')
        code = code.replace('&&', ' and ').replace('||', ' or ')
        code = re.sub(r'!(?!=)', ' not ', code)
        return re.sub(r'\s+', ' ', code)

    def _compile_directives(self, source: str) -> str:
        output = []
        pos = 0

        for match in DIRECTIVE_REGEX.finditer(source):
            if match.start() < pos:
                continue
            name = match.group(1)
            handler = self.directives.get(name)
            if handler is None:
                continue

            args, end = self._read_arguments(source, match.end())
            output.append(source[pos:match.start()])
            output.append(handler(args))
            pos = end

        output.append(source[pos:])
        return ''.join(output)

    def _read_arguments(self, source: str, start: int) -> Tuple[Optional[str], int]:
        """Read a balanced (...) argument list following a directive, if any"""
        index = start
        while index < len(source) and source[index] in ' \t':
            index += 1
        if index >= len(source) or source[index] != '(':
            return None, start

        depth = 0
        quote = None
        for pos in range(index, len(source)):
            char = source[pos]
            if quote:
                if char == quote and source[pos - 1] != '\\':
                    quote = None
            elif char in '\'"':
                quote = char
            elif char == '(':
                depth += 1
            elif char == ')':
                depth -= 1
                if depth == 0:
                    return source[index + 1:pos], pos + 1

        raise TemplateSyntaxException(
            "Unbalanced parentheses in directive",
            line=source.count('\n', 0, start) + 1
        )

    def _require(self, args: Optional[str], directive: str) -> str:
        if args is None or not args.strip():
            raise TemplateSyntaxException(f"@{directive} requires an expression")
        return self.expression(args)

    def _compile_empty(self, args: Optional[str]) -> str:
        # Bare @empty separates the @forelse body from its fallback
        if args is None:
            return '{% else %}'
        return f'{{% if not ({self._require(args, "empty")}) %}}'

    def _compile_foreach(self, args: Optional[str], directive: str) -> str:
        match = FOREACH_REGEX.match((args or '').strip())
        if match is None:
            raise TemplateSyntaxException(f"Invalid @{directive} expression: {args!r}")

        iterable = self.expression(match.group('iterable'))
        if match.group('key'):
            return f"{{% for {match.group('key')}, {match.group('value')} in ({iterable})|items %}}"
        return f"{{% for {match.group('value')} in {iterable} %}}"

    def _compile_include(self, args: Optional[str]) -> str:
        name = self._require(args, 'include')
        if ',' in STRING_REGEX.sub('', name):
            raise TemplateSyntaxException("@include only accepts a view name")
        return f'{{% include {name} %}}'
