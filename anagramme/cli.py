import cProfile
from datetime import datetime
import json
import logging
from pstats import Stats

import click

from anagramme.dictionary import DictionaryError, dictionary_path, load
from anagramme.fragment import Fragment
from anagramme.results import render
from anagramme.solver import Solver


@click.group()
@click.version_option(package_name="anagramme")
@click.option(
    "-r",
    "--resource-dir",
    required=True,
    envvar="ANAGRAMME_RESOURCE_DIR",
    type=click.Path(file_okay=False),
    help="path to the resource directory holding the dictionary files",
)
@click.option(
    "-l",
    "--language",
    default="fr",
    show_default=True,
    envvar="ANAGRAMME_LANGUAGE",
    help="language prefix of the dictionary file to use (e.g. fr for french)",
)
@click.option("-v", "--verbose", is_flag=True)
@click.pass_context
def cli(ctx: click.Context, resource_dir: str, language: str, verbose: bool):
    """find the sentences that are anagrams of a phrase

    Options of anagramme must occur before any subcommands. Subcommands may have
    their own options, which must be provided after the subcommand.

    Words are taken from the dictionary file `<language>.txt` found in the resource
    directory, one word per line. Accents and case are ignored.
    """
    ctx.ensure_object(dict)
    ctx.obj["RESOURCE_DIR"] = resource_dir
    ctx.obj["LANGUAGE"] = language.lower()
    ctx.obj["VERBOSE"] = verbose

    if verbose:
        logging.getLogger("anagramme").setLevel(logging.INFO)
        click.echo("General configuration:", err=True)
        click.echo(
            f"  * dictionary: {dictionary_path(resource_dir, language)}", err=True
        )

    # heavy objects
    try:
        ctx.obj["DICTIONARY"] = load(resource_dir, language)
    except DictionaryError as err:
        raise click.ClickException(str(err)) from err


@cli.command()
@click.argument("phrase", nargs=-1, required=True)
@click.option(
    "--hint",
    default="",
    help="a word or short sentence known to be part of the anagram",
)
@click.option(
    "--max-words",
    type=click.IntRange(min=1),
    default=None,
    help="upper bound on the number of words per sentence. "
    "[default: one word per 6 letters, plus one]",
)
@click.option(
    "--max-nodes",
    type=click.IntRange(min=1),
    default=None,
    help="stop searching after visiting this many search nodes",
)
@click.option(
    "--max-time",
    type=click.FloatRange(min=0),
    default=None,
    help="stop searching after this many seconds",
)
@click.option(
    "--profile",
    "do_profiling",
    is_flag=True,
    default=False,
    show_default=True,
    help="Whether or not to run cProfile on this run",
)
@click.pass_context
def solve(
    ctx: click.Context,
    phrase: tuple,
    hint: str,
    max_words: int,
    max_nodes: int,
    max_time: float,
    do_profiling: bool,
):
    """Search for the anagram sentences of PHRASE

    The letters of the hint are removed from the phrase before searching, and the
    hint is printed in front of every sentence found. Sentences using the same words
    are reported once, longest sentences first.

    Long phrases can take a very long time to search exhaustively. Use --max-nodes or
    --max-time to bound the search, at the cost of missing some sentences.
    """
    p = " ".join(phrase)
    solver = Solver(
        p,
        ctx.obj["DICTIONARY"],
        hint=hint,
        max_boundaries=None if max_words is None else max_words - 1,
        max_nodes=max_nodes,
        max_time=max_time,
    )

    if ctx.obj["VERBOSE"]:
        click.echo(f"Assembling anagrams from: {p}", err=True)
        if hint:
            click.echo(f"  * hint: {hint}", err=True)
        click.echo(f"  * maximum words: {solver.max_boundaries + 1}", err=True)

    if do_profiling:
        now = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        profile_filename = f"profile_{now}.txt"
        stats_filename = f"prof_stats_{now}.txt"
        with cProfile.Profile() as pr:
            sentences = solver.solve()
        with open(profile_filename, "w") as stream:
            stats = Stats(pr, stream=stream)
            stats.strip_dirs()
            stats.sort_stats("time")
            stats.dump_stats(stats_filename)
            stats.print_stats()
    else:
        sentences = solver.solve()

    for line in render(sentences, hint.lower()):
        click.echo(line)

    if solver.truncated:
        click.echo("Search stopped early, some anagrams may be missing", err=True)


@cli.command()
@click.argument("candidate", nargs=-1)
@click.option(
    "-p",
    "--phrase",
    required=True,
    help="the phrase the candidate should be an anagram of",
)
@click.option(
    "--hint",
    default="",
    help="a word or short sentence removed from the phrase before checking",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Format the output as JSON",
)
@click.pass_context
def check(
    ctx: click.Context,
    candidate: tuple,
    phrase: str,
    hint: str,
    json_output: bool,
):
    """Evaluate a candidate sentence

    Checks that every word of the candidate is in the dictionary and that the
    candidate uses exactly the letters of the phrase, less the letters of the hint.
    Exits with status 1 if it does not.
    """
    if candidate == ():
        click.echo("Please provide a candidate to check")
        ctx.exit(1)

    dictionary = ctx.obj["DICTIONARY"]
    solver = Solver(phrase, dictionary, hint=hint)
    placed = Fragment(" ".join(candidate))
    sentence = placed.sentence

    valid = solver.hard_validate(sentence)
    unknown = [w for w in placed.words if not dictionary.contains(w)]
    max_words = solver.max_boundaries + 1
    remaining = solver.letter_bank.copy()
    remaining.subtract(placed.letters)
    missing = "".join(sorted((+remaining).elements()))
    extra = "".join(sorted((-remaining).elements()))

    if json_output:
        click.echo(
            json.dumps(
                {
                    "valid": valid,
                    "sentence": sentence,
                    "unknown_words": unknown,
                    "word_count": len(placed.words),
                    "max_words": max_words,
                    "missing_letters": missing,
                    "extra_letters": extra,
                }
            )
        )
    else:
        click.echo(f"'{sentence}'\n")
        click.echo(f"Valid: {'yes' if valid else 'no'}")
        if unknown:
            click.echo(f"Unknown words: {', '.join(unknown)}")
        if len(placed.words) > max_words:
            click.echo(f"Too many words: {len(placed.words)} > {max_words}")
        if missing:
            click.echo(f"Unused letters: {missing}")
        if extra:
            click.echo(f"Letters not in the phrase: {extra}")

    if not valid:
        ctx.exit(1)


cli.add_command(solve)
cli.add_command(check)


def main():
    cli(auto_envvar_prefix="ANAGRAMME")
