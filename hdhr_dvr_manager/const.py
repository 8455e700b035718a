# -----------------------------------------------------------------------------
# Copyright (c) 2020 J. Matt Roberts
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 2
# of the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the
# Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor,
# Boston, MA  02110-1301, USA.
# -----------------------------------------------------------------------------

import os

BYTES_PER_KB = 10**3
BYTES_PER_MB = 10**6
BYTES_PER_GB = 10**9
BYTES_PER_TB = 10**12
MINUTE_SECONDS = 60
HOUR_SECONDS = MINUTE_SECONDS * 60
DAY_SECONDS = HOUR_SECONDS * 24

DISCOVER_DEVICE_ID = 'discover'

API_HOST = 'api.hdhomerun.com'
CLOUD_DISCOVER_URL = f'https://ipv4-{API_HOST}/discover'
RECORDING_RULES_URL = f'https://{API_HOST}/api/recording_rules'

# Keep and protect files are namespaced by device so that two devices never
# share a policy store.
KEEPS_FILE_FORMAT = '{device_key}_Keeps.json'
PROTECTS_FILE_FORMAT = '{device_key}_Protects.json'
LOG_FILE_FORMAT = 'log-{timestamp}.txt'
LOG_FILE_TIMESTAMP_FORMAT = '%d-%b-%Y %H%M%S'
DISPLAY_TIME_FORMAT = '%d-%b-%Y %H:%M:%S'

DEFAULT_DEVICE_ID = DISCOVER_DEVICE_ID
DEFAULT_TIMEOUT = 10
DEFAULT_VERBOSE = False
DEFAULT_STORE_DIR = os.path.join('~', '.hdhr_dvr_manager')
DEFAULT_SIMULATE = False
DEFAULT_GLOBAL_SETTINGS = {'device_id': DEFAULT_DEVICE_ID,
                           'timeout': DEFAULT_TIMEOUT,
                           'verbose': DEFAULT_VERBOSE,
                           }
DEFAULT_DEVICE_SETTINGS = {'store_dir': DEFAULT_STORE_DIR,
                           'simulate': DEFAULT_SIMULATE,
                           }

# Command keywords
CMD_SERIES = 'ser'
CMD_CHANNELS = 'chan'
CMD_NEW = 'new'
CMD_RULES = 'rules'
CMD_LOG = 'log'
CMD_STATUS = 'status'
CMD_INFO = 'info'
CMD_SIMULATE = 'sim'
CMD_VERBOSE = 'ver'
CMD_HELP = ['help', '?']
CMD_QUIT = ['quit', 'q']

# Series sub-actions
ACTION_KEEP = 'keep'
ACTION_DELETE = 'del'
ACTION_CLEAN = 'clean'
ACTION_PROTECT = 'protect'

HELP_TOKEN = '?'
WILDCARD_TOKEN = '*'
FORCE_FLAG = '-f'
SAVE_FLAG = '-save'

# Slash-style options accepted on the command line, and the long options they
# stand for
SLASH_OPTIONS = {'/simulate': '--simulate',
                 '/verbose': '--verbose',
                 '/cmd': '--cmd',
                 }
