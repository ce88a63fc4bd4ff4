"""
Logging system for Sprite Atlas Prep.
Handles console logging setup and per-build project logs.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from .settings import AtlasSettings


def setup_logging(log_level: int = logging.INFO) -> None:
    """Setup basic logging configuration."""
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def log_project(log_path: Path, project_name: str, timestamp: datetime,
                settings: 'AtlasSettings', num_files: int, output_path: Path,
                final_size: Tuple[int, int], process_time: float, images_placed: int,
                unplaced: Optional[List[str]] = None, error: Optional[str] = None) -> None:
    """
    Log complete atlas build information to file.

    Args:
        log_path: Path to log file
        project_name: Name of the project
        timestamp: Start timestamp
        settings: Settings the atlas was built with
        num_files: Number of input sprites
        output_path: Path to output PNG
        final_size: Final atlas dimensions (width, height)
        process_time: Processing time in seconds
        images_placed: Number of sprites successfully placed
        unplaced: Names of sprites that did not fit
        error: Error message if any
    """
    size_mode = "auto" if settings.auto_size else f"fixed {settings.width} x {settings.height}"

    log_content = f"""Sprite Atlas Prep - Project Log
{'=' * 50}

Project Information:
    Project Name: {project_name}
    Timestamp: {timestamp.strftime('%Y-%m-%d %H:%M:%S')}

Input Parameters:
    Atlas Size: {size_mode}
    Trimming: {"on" if settings.trimming else "off"}
    Padding: {settings.padding} pixels
    Free Space: {settings.free_space.value}
    Circular: {"on" if settings.circular else "off"}
    Border: {f"{settings.border_width}px {settings.border_color}" if settings.border else "off"}
    Input Files: {num_files}
    Images Placed: {images_placed}

Output Information:
    Output Path: {output_path.name}
    Final Atlas Size: {final_size[0]} x {final_size[1]} pixels
    Total Pixels: {final_size[0] * final_size[1]:,}

Process Information:
    Processing Time: {process_time:.2f} seconds
    Completion Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}

"""

    if unplaced:
        log_content += "Unplaced Sprites:\n"
        log_content += "".join(f"    {name}\n" for name in unplaced)
        log_content += "\n"

    if error:
        log_content += f"""Error Information:
    Error: {error}
    Status: FAILED

"""

    success_rate = (images_placed / num_files * 100) if num_files > 0 else 0
    status = "SUCCESS" if not error and images_placed == num_files else "PARTIAL" if images_placed > 0 else "FAILED"

    log_content += f"""Summary:
    Project: {project_name}
    Sprites Placed: {images_placed}/{num_files}
    Success Rate: {success_rate:.1f}%
    Final Status: {status}

"""

    try:
        with open(log_path, 'w', encoding='utf-8') as f:
            f.write(log_content)
    except OSError as e:
        logger = logging.getLogger(__name__)
        logger.error(f"Failed to write log file {log_path}: {e}")


def generate_log_filename(project_name: str) -> str:
    """
    Generate standardized log filename.

    Args:
        project_name: Name of the project

    Returns:
        Formatted log filename
    """
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    return f"{project_name}_{timestamp}.log"
