"""Name transformation modules.

Each module handles one step of the naming pipeline:
- ascii_folder: Unicode to ASCII folding
- posix_sanitizer: safe character set, collapsing and trimming
- case_transform_module: lower/upper/title case
- date_formatter: date prefix layouts and timestamp source
- reserved_names: Windows device name guard
"""
