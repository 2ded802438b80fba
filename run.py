#!/usr/bin/env python3
"""
Image Enhancer - Main Entry Point

Usage:
    # Pick the image and method with dialogs
    python run.py

    # Enhance a given image with histogram equalization
    python run.py --input path/to/image.jpg --method histogram

    # Fuzzy enhancement, no comparison window
    python run.py --input image.png --method fuzzy --no-display

    # Enable debug mode
    python run.py --input image.jpg --debug
"""

import argparse
import sys
from typing import List, Optional

from configs import EnhancerConfig
from pipeline import ImageEnhancer
from utils.logger import get_logger


SUCCESS_MESSAGE = "Enhancement completed! Check the '{}' folder in your project directory."


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Single image brightness enhancement",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py
  python run.py --input image.jpg --method histogram
  python run.py --input image.png --method fuzzy --no-display
  python run.py --input image.jpg --debug
        """
    )

    # Input/Output
    parser.add_argument(
        "--input", "-i",
        type=str,
        default=None,
        help="Input image path (omit to choose with a file dialog)"
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default="output",
        help="Output directory (default: output)"
    )

    # Method
    parser.add_argument(
        "--method", "-m",
        type=str,
        default=None,
        choices=EnhancerConfig().METHODS,
        help="Enhancement method (asked with a dialog when --input is omitted, "
             "otherwise defaults to histogram)"
    )

    # Display
    parser.add_argument(
        "--no-display",
        action="store_true",
        help="Do not open the before/after comparison window"
    )

    # Debug options
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode with verbose output and a log file in the output directory"
    )

    return parser.parse_args(argv)


def create_config(args) -> EnhancerConfig:
    """Create enhancer configuration from arguments."""
    return EnhancerConfig(
        debug=args.debug,
        log_file=f"{args.output}/enhancer.log",
        method=args.method or "histogram",
        input_path=args.input or "",
        output_dir=args.output,
        display=not args.no_display,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    interactive = args.input is None

    if interactive:
        import gui

        image_path = gui.ask_image_path()
        if image_path is None:
            return 0
        args.input = image_path

    config = create_config(args)

    try:
        enhancer = ImageEnhancer(config)

        method = args.method
        if method is None and interactive:
            method = gui.ask_method(ImageEnhancer.METHOD_NAMES)
            if method is None:
                enhancer.logger.info("No enhancement method chosen, nothing to do")
                return 0

        result = enhancer.run(method=method)

    except (OSError, RuntimeError) as e:
        if isinstance(e, RuntimeError):
            message = str(e)
        else:
            message = f"Error processing image: {e}"
        get_logger().error(message)
        if interactive:
            gui.show_error(message)
        return 1

    if interactive:
        gui.show_info("Success", SUCCESS_MESSAGE.format(config.output_dir))

    print("\n" + "="*60)
    print("ENHANCEMENT RESULTS")
    print("="*60)
    print(f"Image: {result.image_path} ({result.image_size[0]}x{result.image_size[1]})")
    print(f"  Method: {ImageEnhancer.METHOD_NAMES[result.method]}")
    print(f"  Enhanced image: {result.enhanced_path}")
    print(f"  Histogram chart: {result.histogram_path}")
    print("="*60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
