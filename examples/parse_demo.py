import sys
from pathlib import Path

from flagline.config import loader
from flagline.console import console
from flagline.exceptions import ParseError
from flagline.parser import Arity, Options, parse, posix_flatten

options = Options()
options.add_option("-f", "--file", arity=Arity.ONE, help="Input file")
options.add_option("-v", "--verbose", help="Verbose output")
options.add_option("-o", "--output", arity=Arity.ONE, required=True, help="Output file")
options.add_option("-I", "--include", arity=Arity.UNBOUNDED, help="Include paths")
options.add_option("--json")
options.add_option("--yaml")
options.add_group("--json", "--yaml", name="format")

samples = [
    ["-f", "in.txt", "-v", "-o", "out.txt"],
    ["-vf", "in.txt", "--output=out.txt", "-I", "lib", "src", "--json", "--", "-x"],
    ["-f"],
    ["-o", "out.txt", "--json", "--yaml"],
]

for tokens in samples:
    try:
        cmd = parse(options, tokens, flattener=posix_flatten)
    except ParseError as error:
        console.print(f"{tokens} -> [red]{type(error).__name__}[/]: {error}")
    else:
        console.print(f"{tokens} ->", cmd.to_dict())

config = loader(Path(__file__).parent / "parser.yaml")
console.print(config.parse(sys.argv[1:] or ["-o", "out.txt"]).to_dict())
