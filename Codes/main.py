# main.py

import os
import json
import argparse
from dataclasses import replace
from pathlib import Path

from sentiment_scorer import (
    DEFAULT_SCORING_OPTIONS, STRATEGIES, ScoringOptions,
    compare_strategies, narration_text, signed,
)
from text_tokenizer import contains_supported_emoji
from achievement_store import AchievementStore
from fuzzy_term_expander import FuzzyTermExpander
from learning_activities import (
    EXERCISE_PROMPTS, QUIZ_QUESTIONS, check_exercise, grade_quiz,
)
from batch_scorer import TEXT_COL, run_batch

# ~~~~~~~~~~ Paths / config ~~~~~~~~~~
BADGES_PATH = Path(os.environ.get("SENTIMENT_BADGES_PATH", "../Outputs/badges.json"))
BATCH_OUTPUT_DIR = Path("../Outputs/Batch")

MODES = ["rule", "valence", "compare"]

EXAMPLES = [
    "I love this game!",
    "This is not good.",
    "This is very very good!",
    "The movie was boring 😞",
    "Is it fun??? I don't know???",
]

# ~~~~~~~~~~ Rendering ~~~~~~~~~~

def render_result(result, title=None):
    lines = []
    if title:
        lines.append(f"--- {title} ---")
    lines.append(f"{result.icon}  {result.label}  (score {result.score})")

    if result.annotations:
        shown = []
        for a in result.annotations:
            shown.append(f"{a.token} ({signed(a.contribution)})" if a.contribution else a.token)
        lines.append("Tokens: " + "  ".join(shown))

    for reason in result.explanations:
        lines.append(f"  - {reason}")
    return "\n".join(lines)


def render_compare(rule_res, valence_res):
    return "\n".join([
        f"{'Rule':<10} {rule_res.icon}  {rule_res.label:<9} score {rule_res.score}",
        f"{'Valence':<10} {valence_res.icon}  {valence_res.label:<9} score {valence_res.score}",
    ])


def celebrate():
    # stand-in for the confetti burst
    print("🎉 🎊 🎉 🎊 🎉  Perfect score!  🎉 🎊 🎉 🎊 🎉")

# ~~~~~~~~~~ Actions ~~~~~~~~~~

def analyze(text, mode, options, store, speak=False, as_json=False):
    """
    Run one analysis the way the playground's Analyze button does:
    score, render, narrate, then hand out badges.
    """
    if mode == "compare":
        rule_res, valence_res = compare_strategies(text, options)
        last = rule_res
        if as_json:
            print(json.dumps({"rule": rule_res.to_dict(), "valence": valence_res.to_dict()},
                             ensure_ascii=False, indent=2))
        else:
            print(render_compare(rule_res, valence_res))
    else:
        last = STRATEGIES[mode](text, options)
        if as_json:
            print(json.dumps(last.to_dict(), ensure_ascii=False, indent=2))
        else:
            print(render_result(last))

    if speak:
        print(f"🔊 {narration_text(last)}")

    if store is not None:
        store.award("first-analysis")
        if contains_supported_emoji(text):
            store.award("emoji-explorer")
        if not options.is_default():
            store.award("tuning-tinkerer")
    return last


def run_playground(options, mode, store):

    # Interactive loop. Lines starting with ":" change the tuning, anything
    # else is analyzed with the current snapshot of options.
    print("Sentiment playground. Type text to analyze, :help for commands.")
    print("Examples: " + " | ".join(EXAMPLES))

    while True:
        try:
            line = input(f"[{mode}]> ").strip()
        except EOFError:
            break
        if not line:
            continue

        if not line.startswith(":"):
            analyze(line, mode, options, store)
            continue

        cmd, _, arg = line[1:].partition(" ")
        arg = arg.strip()
        if cmd in ("quit", "q"):
            break
        elif cmd == "help":
            print(":mode rule|valence|compare  :intens N  :excl N  :flip on|off  "
                  ":reset  :options  :badges  :quit")
        elif cmd == "mode" and arg in MODES:
            mode = arg
        elif cmd == "intens" and arg.isdigit():
            options = replace(options, intensifier_boost_max=int(arg))
            store.award("tuning-tinkerer")
            print(f"Intensifier boost max: +{options.intensifier_boost_max}")
        elif cmd == "excl" and arg.isdigit():
            options = replace(options, exclamation_power=int(arg))
            store.award("tuning-tinkerer")
            print(f"Exclamation power: +{options.exclamation_power}")
        elif cmd == "flip" and arg in ("on", "off"):
            options = replace(options, flip_on_negation=(arg == "on"))
            store.award("tuning-tinkerer")
            print(f"Flip on negation: {arg}")
        elif cmd == "reset":
            options = DEFAULT_SCORING_OPTIONS
            print("Tuning reset to defaults.")
        elif cmd == "options":
            print(json.dumps(options.to_dict()))
        elif cmd == "badges":
            print("\n".join(store.render_badges()))
        else:
            print(f"Unknown command: {line}  (try :help)")
    return options


def run_quiz(store, answers=None):
    if answers is None:
        answers = {}
        for i, q in enumerate(QUIZ_QUESTIONS, start=1):
            print(f"\nQ{i}. {q['question']}")
            print("    " + " / ".join(q["choices"]))
            answers[q["id"]] = input("Your answer: ").strip().lower()

    result = grade_quiz(answers, store=store, celebrate=celebrate)
    print(result.message)
    return result

# ~~~~~~~~~~ Main ~~~~~~~~~~

def build_parser():
    parser = argparse.ArgumentParser(
        description="Sentiment Playground – explainable lexicon-based sentiment scoring."
    )
    parser.add_argument(
        "--badges-file",
        type=Path,
        default=BADGES_PATH,
        help="JSON file where earned badges are kept.",
    )
    parser.add_argument(
        "--intensifier-boost-max",
        type=int,
        default=DEFAULT_SCORING_OPTIONS.intensifier_boost_max,
        help="Cap on the boost intensifiers add to a feeling word.",
    )
    parser.add_argument(
        "--exclamation-power",
        type=int,
        default=DEFAULT_SCORING_OPTIONS.exclamation_power,
        help="Cap on the boost '!' marks add to each feeling word.",
    )
    parser.add_argument(
        "--no-flip-on-negation",
        action="store_true",
        help="Do not flip feeling words that follow a negation.",
    )
    parser.add_argument(
        "--mode",
        choices=MODES,
        default="rule",
        help="Scoring strategy: 'rule' (lexicon), 'valence' (graded table) or 'compare' (both).",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("analyze", help="Score one piece of text.")
    p.add_argument("text")
    p.add_argument("--json", action="store_true", help="Print the full result as JSON.")
    p.add_argument("--speak", action="store_true", help="Print a spoken-style summary.")

    sub.add_parser("playground", help="Interactive analyzer with live tuning.")

    p = sub.add_parser("exercise", help="Check an exercise answer.")
    p.add_argument("number", type=int, choices=sorted(EXERCISE_PROMPTS))
    p.add_argument("word", nargs="+")

    p = sub.add_parser("quiz", help="Take the three-question quiz.")
    p.add_argument("--answers", nargs=3, default=None, metavar=("Q1", "Q2", "Q3"))

    sub.add_parser("badges", help="List earned badges.")

    p = sub.add_parser("batch", help="Score a CSV / Excel / pickle file with both strategies.")
    p.add_argument("input", type=Path, help="File to score, e.g. ../data/sample_texts.csv.")
    p.add_argument("--text-col", default=TEXT_COL)
    p.add_argument("--out-dir", type=Path, default=BATCH_OUTPUT_DIR)

    p = sub.add_parser("hint", help="Suggest known lexicon words close to WORD.")
    p.add_argument("word")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    options = ScoringOptions(
        intensifier_boost_max=args.intensifier_boost_max,
        exclamation_power=args.exclamation_power,
        flip_on_negation=not args.no_flip_on_negation,
    )
    store = AchievementStore(args.badges_file)

    if args.command == "analyze":
        analyze(args.text, args.mode, options, store, speak=args.speak, as_json=args.json)

    elif args.command == "playground":
        run_playground(options, args.mode, store)

    elif args.command == "exercise":
        expander = FuzzyTermExpander()
        print(EXERCISE_PROMPTS[args.number])
        feedback = check_exercise(args.number, " ".join(args.word), options,
                                  store=store, expander=expander)
        print(f"Sentence: {feedback.sentence}")
        print(render_result(feedback.result))
        print(feedback.message)
        if feedback.hint:
            print(f"Hint: {feedback.hint}")

    elif args.command == "quiz":
        run_quiz(store, answers=args.answers)

    elif args.command == "badges":
        print("\n".join(store.render_badges()))

    elif args.command == "batch":
        run_batch(args.input, args.out_dir, text_col=args.text_col, options=options)

    elif args.command == "hint":
        expander = FuzzyTermExpander()
        print(f"Known vocabulary size: {len(expander.vocab)}")
        found = expander.suggestions(args.word, limit=5)
        if expander.is_known(args.word):
            print(f"“{args.word}” is already in the lexicon.")
        elif found:
            print(f"Did you mean: {', '.join(found)}?")
        else:
            print(f"No close lexicon words for “{args.word}”.")

    return 0


def run():
    raise SystemExit(main())


if __name__ == "__main__":
    run()
