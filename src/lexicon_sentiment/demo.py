# src/lexicon_sentiment/demo.py
import argparse
import json
import logging
import sys


def main(argv=None):
    """CLI demo: score text with the lexicon + rules analyzer and print the result as JSON."""
    from .analysis.orchestrator import SentimentAnalyzer, get_default_analyzer
    from .analysis.settings import load_settings
    from .analysis.utils.load_config import ConfigFileNotFound, ConfigParseError, DataDirNotFound

    parser = argparse.ArgumentParser(
        prog="lexsent",
        description="Score text sentiment with a lexicon and rules (negation, boosters, phrases).",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to analyze (e.g. The product is great but the support is terrible)",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    parser.add_argument(
        "--no-confidence",
        action="store_false",
        dest="include_confidence",
        help="Skip confidence estimation",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Also print the scored spans (words and phrases) behind the score",
    )
    parser.add_argument(
        "--settings",
        default=None,
        help="Settings file name under data/ (default: sentiment_settings)",
    )

    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    text = " ".join(args.text) or "The product is great but the support is terrible"

    try:
        if args.settings:
            analyzer = SentimentAnalyzer(settings=load_settings(args.settings))
        else:
            analyzer = get_default_analyzer()
    except (ConfigParseError, DataDirNotFound, ConfigFileNotFound) as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    result = analyzer.analyze(text, include_confidence=args.include_confidence)
    payload = {"text": text, **result.to_dict()}
    if args.explain:
        payload["spans"] = [
            {
                "text": s.text,
                "start": s.start,
                "end": s.end,
                "clause": s.clause,
                "weight": s.weight,
                "phrase": s.is_phrase,
            }
            for s in analyzer.explain(text)
        ]
    print(json.dumps(payload, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
