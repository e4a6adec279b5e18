# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

from pathlib import Path

from platformdirs import user_config_dir, user_log_path

APP_NAME = "headerstamp"
ENV_APP_PREFIX = APP_NAME.upper() + "_"
LOG_DIR = Path(user_log_path(appname=APP_NAME))

CONFIG_FILENAME = "headerstampconfig.toml"

GLOBAL_CONFIG_FILE = Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME
LOCAL_CONFIG_FILE = Path(CONFIG_FILENAME)

ASSETS_DIR = Path(__file__).parent / "assets"
DEFAULT_LICENSE_FILE = ASSETS_DIR / "osl.txt"

DEFAULT_EXTENSIONS = [
    "php",
    "js",
    "ts",
    "css",
    "scss",
    "tpl",
    "html.twig",
    "json",
    "vue",
]

# string marking an existing comment as one of ours, safe to overwrite
DEFAULT_DISCRIMINATION_STRING = "NOTICE OF LICENSE"

CURRENT_YEAR_PLACEHOLDER = "{currentYear}"

MANIFEST_FILENAMES = ("composer.json", "package.json")
MANIFEST_AUTHOR = {"name": "PrestaShop SA", "email": "contact@prestashop.com"}
