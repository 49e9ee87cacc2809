# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import re
from argparse import HelpFormatter, Action, ArgumentParser, SUPPRESS
from typing import Optional, Iterable, List

from .console import Console


class CustomHelpFormatter(HelpFormatter):
    INDENT_INCREMENT = 2
    INDENT = ' ' * INDENT_INCREMENT

    @staticmethod
    def format_header(title: str) -> str:
        return Console.FMT_BOLD(title.upper())

    def __init__(self, prog):
        super().__init__(prog, max_help_position=30, indent_increment=self.INDENT_INCREMENT)

    def start_section(self, heading: Optional[str]):
        super().start_section(self.format_header(heading))

    def add_usage(self, usage: Optional[str], actions: Iterable[Action], groups: Iterable,
                  prefix: Optional[str] = ...):
        super().add_text(self.format_header('usage'))

        usage = usage.replace("\n", f"\n{self.INDENT}")
        super().add_usage(usage, actions, groups, prefix=self.INDENT)

    def add_examples(self, examples: List[str]):
        self.start_section('example' + ('s' if len(examples) > 1 else ''))
        self._add_item(self._format_text, ['\n'.join(examples)])
        self.end_section()

    def _format_action_invocation(self, action):
        # same as in superclass, but without printing argument for short options
        if not action.option_strings:
            default = self._get_default_metavar_for_positional(action)
            metavar, = self._metavar_formatter(action, default)(1)
            return metavar

        parts = []
        if action.nargs == 0:
            parts.extend(action.option_strings)
        else:
            default = self._get_default_metavar_for_optional(action)
            args_string = self._format_args(action, default)
            for option_string in action.option_strings:
                if len(option_string) > 2 or len(action.option_strings) == 1:
                    parts.append(f'{option_string} {args_string}')
                else:
                    parts.append(option_string)
        return ', '.join(parts)

    def _format_text(self, text: str) -> str:
        return super()._format_text(text).rstrip('\n') + '\n'

    def _fill_text(self, text, width, indent):
        return ''.join(indent + line for line in text.splitlines(keepends=True))


class CustomArgumentParser(ArgumentParser):
    def __init__(self, examples: List[str] = None, epilog: List[str] = None, usage: List[str] = None, **kwargs):
        self.examples = examples
        kwargs.update({
            'epilog': '\n'.join(epilog or []),
            'usage': '\n'.join(usage or []),
        })
        super().__init__(**kwargs)

    def format_help(self) -> str:
        formatter = self._get_formatter()
        if self.epilog:
            formatter.add_text(' ')
            formatter.add_text(self.epilog)
        if self.examples and isinstance(formatter, CustomHelpFormatter):
            formatter.add_examples(self.examples)

        ending_formatted = formatter.format_help()
        self.epilog = None

        result = super().format_help() + ending_formatted
        # remove ':' from headers ('<_b>header:<_f>'):
        result = re.sub(r'(\033\[[0-9;]*m)?\s*:\s*(\n|\033|$)', r'\1\2', result)
        return result


class AppArgumentParser(CustomArgumentParser):
    def __init__(self):
        fmt_b = Console.FMT_BOLD
        fmt_u = Console.FMT_UNDERLINE
        fmt_default = Console.FMT_DEFAULT

        super().__init__(
            description='Styling parameters to SGR escape sequences converter',
            usage=[
                '%(prog)s [<options>] [<file>]',
                '%(prog)s [<options>] -e <text>',
                '%(prog)s --legend',
                '%(prog)s --version',
                '%(prog)s --help',
            ],
            epilog=[
                'Styling parameter is a format parameter containing a chain of directives: "+<style>" adds a style, '
                '"-<style>" removes it and "#<color>" sets a color. Text before the first directive is kept as a '
                f'regular format parameter; directives placed after "&" are applied after it. Run with {fmt_b("--legend")} '
                'to see all the keywords.',
            ],
            examples=[
                'Print bold red text',
                ''.ljust(4) + f"{fmt_u('%(prog)s')} -e '{{+Bold#RedFg}}Alert{{+Reset}}'",
                '',
                'Highlight a value and reset the color afterwards, show escapes instead of applying them',
                ''.ljust(4) + f"{fmt_u('%(prog)s')} -V -a name={fmt_u('world')} -e 'Hello {{name#f(208)&#DefaultFg}}'",
                '',
                'Rewrite a quoted literal read from stdin',
                ''.ljust(4) + f"echo '\"{{+Bold}}text\"' | {fmt_u('%(prog)s')} --literal",
                '',
            ],
            add_help=False,
            formatter_class=lambda prog: CustomHelpFormatter(prog),
            prog='sgrfmt'
        )

        self.add_argument('filename', metavar='<file>', nargs='?', help='file to read from; if empty or "-", read stdin instead')

        modes_group = self.add_argument_group('operating mode')
        modes_group_nested = modes_group.add_mutually_exclusive_group()
        modes_group_nested.add_argument('-e', '--expression', metavar='<text>', action='store', default=None, help='rewrite <text> instead of reading a file')
        modes_group_nested.add_argument('-l', '--legend', action='store_true', default=False, help='show keyword list with SGR codes and exit')
        modes_group_nested.add_argument('-v', '--version', action='store_true', default=False, help='show app version and exit')
        modes_group.add_argument('-h', '--help', action='help', default=SUPPRESS, help='show this help message and exit')

        input_group = self.add_argument_group('input options')
        input_group.add_argument('-r', '--raw', action='store_true', default=False, help='do not decode backslash escapes')
        input_group.add_argument('-L', '--literal', action='store_true', default=False, help='input is a quoted literal, e.g. "..." or r#"..."#; print rewritten literal')
        input_group.add_argument('-a', '--arg', metavar='<key>=<value>', dest='args', action='append', help='format rewritten text with named argument <key>; can be specified multiple times')

        output_group = self.add_argument_group('output options')
        output_group.add_argument('-V', '--visible', action='store_true', default=False, help='print escape sequences visibly, as "\\e[...m"')
        output_group.add_argument('-n', '--no-newline', action='store_true', default=False, help='do not print a newline after the result of ' + fmt_b('--expression'))
        output_group.add_argument('--no-color', action='store_true', default=False, help='disable colors in diagnostic messages')
        output_group.add_argument('-d', '--debug', action='count', default=0, help='enable debug mode; can be used up to 2 times, each level increases verbosity (-d|dd) ' + fmt_default('[default: off]'))
