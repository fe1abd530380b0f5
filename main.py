#!/usr/bin/env python3
"""
Image to ASCII Art Converter
============================
Command line front end for the luma_ascii package.

Converts an image file to ASCII art on stdout, to a .txt file or to a
standalone .html page, or runs the local upload server.
"""

import asyncio
import logging
import sys

from luma_ascii.config import Presets
from luma_ascii.constants import (
    CharacterSet,
    ContrastMode,
    GammaTransfer,
    NormalizationPolicy,
    SERVER_HOST,
    SERVER_PORT,
)
from luma_ascii.errors import AsciiArtError
from luma_ascii.formatters import HtmlFormatter
from luma_ascii.pipeline import convert_path


# =============================================================================
# COMMAND LINE INTERFACE
# =============================================================================

def create_argument_parser():
    """Create command line argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description='Convert images to ASCII art',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s image.png                          # Adaptive conversion to stdout
  %(prog)s image.png --preset dark            # Lower gamma, darker output
  %(prog)s image.png -o art.html              # Standalone HTML page
  %(prog)s image.png --normalization minmax --contrast fixed
  %(prog)s --serve --port 8000                # Upload page in the browser
        """
    )

    # Input/Output
    parser.add_argument('input', nargs='?', help='Input image file')
    parser.add_argument('-o', '--output', help='Output file (txt or html)')

    # Preset
    parser.add_argument('-p', '--preset', choices=list(Presets.all()), default='adaptive',
                        help='Starting configuration')

    # Luminance options
    parser.add_argument('--gamma', type=float, help='Transfer function exponent (2.2, or 1.6 for darker)')
    parser.add_argument('--transfer', choices=['piecewise', 'direct'],
                        help='sRGB piecewise curve or direct power law')

    # Normalization options
    parser.add_argument('--normalization', choices=['minmax', 'adaptive'],
                        help='Range stretching policy')
    parser.add_argument('--sigma', type=float, help='Adaptive bound width in standard deviations')
    parser.add_argument('--contrast', choices=['fixed', 'variance'],
                        help='Contrast curve exponent mode')
    parser.add_argument('--contrast-exponent', type=float, help='Exponent for fixed contrast')
    parser.add_argument('--contrast-k', type=float, help='k in 1 + k*std for variance contrast')

    # Character options
    parser.add_argument('--charset', default=None,
                        help='Character set: ' + ', '.join(CharacterSet.names()))
    parser.add_argument('--custom-charset', help='Custom glyph ramp (densest first)')
    parser.add_argument('--spacer', help='String placed after every glyph')
    parser.add_argument('--darkness-bias', action=argparse.BooleanOptionalAction, default=None,
                        help='Shift glyph indices toward the end of the ramp')

    # Size options
    parser.add_argument('--landscape-width', type=int, help='Output width for landscape images')
    parser.add_argument('--portrait-height', type=int, help='Output height for portrait images')
    parser.add_argument('--char-ratio', type=float, help='Glyph aspect ratio (width/height)')

    # Server options
    parser.add_argument('--serve', action='store_true', help='Run the upload server')
    parser.add_argument('--host', default=SERVER_HOST, help='Server host')
    parser.add_argument('--port', type=int, default=SERVER_PORT, help='Server port')

    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    return parser


def build_config(args):
    """Build a ConversionConfig from parsed arguments."""
    transfer_map = {
        'piecewise': GammaTransfer.PIECEWISE,
        'direct': GammaTransfer.DIRECT,
    }
    normalization_map = {
        'minmax': NormalizationPolicy.MINMAX,
        'adaptive': NormalizationPolicy.ADAPTIVE,
    }
    contrast_map = {
        'fixed': ContrastMode.FIXED_EXPONENT,
        'variance': ContrastMode.VARIANCE_SCALED,
    }

    if args.custom_charset:
        charset = args.custom_charset
    elif args.charset:
        charset = CharacterSet.get_preset(args.charset)
    else:
        charset = None

    return Presets.get(args.preset).replace(
        gamma=args.gamma,
        gamma_transfer=transfer_map.get(args.transfer),
        normalization=normalization_map.get(args.normalization),
        adaptive_sigma=args.sigma,
        contrast_mode=contrast_map.get(args.contrast),
        contrast_exponent=args.contrast_exponent,
        contrast_k=args.contrast_k,
        darkness_bias=args.darkness_bias,
        charset=charset,
        spacer=args.spacer,
        landscape_width=args.landscape_width,
        portrait_height=args.portrait_height,
        char_aspect_ratio=args.char_ratio,
    )


def main(argv=None):
    """Main entry point for command line usage."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    try:
        config = build_config(args)
    except AsciiArtError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.serve:
        from luma_ascii.server import serve
        if not args.verbose:
            logging.basicConfig(level=logging.INFO, format='%(message)s')
        print(f"Serving on http://{args.host}:{args.port}/")
        serve(args.host, args.port, config)
        return 0

    # Check for input
    if not args.input:
        parser.print_help()
        return 1

    try:
        result = asyncio.run(convert_path(args.input, config))
    except AsciiArtError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Loaded image: {args.input}")
        print(f"Size: {result.original_size}")
        print(f"Output size: {result.width}x{result.height}")
        if result.stats is not None:
            print(f"Luminance: min={result.stats.min:.3f} max={result.stats.max:.3f} "
                  f"mean={result.stats.mean:.3f} std={result.stats.std:.3f}")
        print()

    # Handle output
    if args.output:
        ext = args.output.lower().split('.')[-1]
        if ext == 'html':
            content = HtmlFormatter.format_result(result, title=args.input)
        else:  # txt or other
            content = result.text
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(content)
        print(f"Saved to {args.output}")
    else:
        sys.stdout.write(result.text)

    return 0


# =============================================================================
# ENTRY POINT
# =============================================================================

if __name__ == '__main__':
    sys.exit(main())
