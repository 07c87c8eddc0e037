"""Script to generate the CSS for a framework and save it for inspection or use in a project."""
import argparse
import json
import sys
from pathlib import Path
from classmcp.catalog.registry import FrameworkRegistry, resolve_classes
from classmcp.core.minifier import (
    calculate_savings,
    create_minification_map,
    export_map,
    generate_minified_css,
    minify_class,
)


def main() -> int:
    parser = argparse.ArgumentParser(description="Write classmcp CSS for a framework to a file.")
    parser.add_argument("framework", nargs="?", default="tailwind", help="Framework id (default: tailwind)")
    parser.add_argument("--minified", action="store_true", help="Use minified class names (a, b, c...)")
    parser.add_argument("--no-states", action="store_true", help="Leave out hover/focus/active state variants")
    parser.add_argument("--category", action="append", dest="categories", help="Only include this category (repeatable)")
    parser.add_argument("--output", "-o", default=None, help="Output CSS path (default: test_output/<framework>.css)")
    parser.add_argument("--export-map", default=None, help="Also write the minification map as JSON to this path")
    args = parser.parse_args()

    registry = FrameworkRegistry()
    if not registry.has_framework(args.framework):
        print(f"Unknown framework: {args.framework}. Available: {', '.join(registry.framework_ids())}")
        return 1

    include_states = not args.no_states
    output_path = Path(args.output) if args.output else Path(__file__).parent.parent / "test_output" / f"{args.framework}.css"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    class_map = None
    if args.minified or args.export_map:
        patterns = registry.get_patterns(args.framework)
        if args.categories:
            patterns = [p for p in patterns if p.category in args.categories]
        class_map = create_minification_map()
        for p in patterns:
            minify_class(class_map, p.id, resolve_classes(p, include_states=include_states))

    if args.minified:
        css = generate_minified_css(class_map, framework=args.framework, include_comments=True)
    else:
        css = registry.generate_css(args.framework, categories=args.categories, include_states=include_states)
    output_path.write_text(css, encoding="utf-8")

    print("=" * 60)
    print(f"CSS GENERATION ({registry.display_name(args.framework)})")
    print("=" * 60)
    print(f"Written to: {output_path.absolute()}")
    print(f"File size: {output_path.stat().st_size} bytes")

    if class_map is not None:
        savings = calculate_savings(class_map)
        print(f"Classes: {len(class_map)}")
        print(f"Original tokens: ~{savings.total_original_tokens}")
        print(f"Minified tokens: ~{savings.total_minified_tokens}")
        print(f"Savings: {savings.savings_percent:.1f}%")

    if args.export_map:
        map_path = Path(args.export_map)
        map_path.parent.mkdir(parents=True, exist_ok=True)
        map_path.write_text(json.dumps(export_map(class_map), indent=2), encoding="utf-8")
        print(f"Map written to: {map_path.absolute()}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
