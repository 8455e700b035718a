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


import logging
import os
import time

from hdhr_dvr_manager import command
from hdhr_dvr_manager.const import ACTION_CLEAN
from hdhr_dvr_manager.const import ACTION_DELETE
from hdhr_dvr_manager.const import ACTION_KEEP
from hdhr_dvr_manager.const import ACTION_PROTECT
from hdhr_dvr_manager.const import CMD_CHANNELS
from hdhr_dvr_manager.const import CMD_HELP
from hdhr_dvr_manager.const import CMD_INFO
from hdhr_dvr_manager.const import CMD_LOG
from hdhr_dvr_manager.const import CMD_NEW
from hdhr_dvr_manager.const import CMD_QUIT
from hdhr_dvr_manager.const import CMD_RULES
from hdhr_dvr_manager.const import CMD_SERIES
from hdhr_dvr_manager.const import CMD_SIMULATE
from hdhr_dvr_manager.const import CMD_STATUS
from hdhr_dvr_manager.const import CMD_VERBOSE
from hdhr_dvr_manager.const import FORCE_FLAG
from hdhr_dvr_manager.const import LOG_FILE_FORMAT
from hdhr_dvr_manager.const import LOG_FILE_TIMESTAMP_FORMAT
from hdhr_dvr_manager.const import SAVE_FLAG
from hdhr_dvr_manager.hdhr import errors
from hdhr_dvr_manager.inventory import NotFoundError
from hdhr_dvr_manager.store import PersistenceError

logger = logging.getLogger(__name__)

INVALID_COMMAND_MESSAGE = 'Invalid command. Use ser ? for help.'
NOT_FOUND_MESSAGE = 'Series matching that sequence was not found.'
KEEP_COUNT_REQUIRED_MESSAGE = 'A valid number is required after keep'


class Interpreter:
    """Runs one command line at a time against a Session"""

    def __init__(self, session, view, log_dir=os.curdir):
        self.session = session
        self.view = view
        self.log_dir = log_dir
        self._keywords = {
            CMD_SERIES: self.do_series,
            CMD_CHANNELS: self.do_channels,
            CMD_NEW: self.do_new,
            CMD_RULES: self.do_rules,
            CMD_LOG: self.do_log,
            CMD_STATUS: self.do_status,
            CMD_INFO: self.do_info,
            CMD_SIMULATE: self.do_simulate,
            CMD_VERBOSE: self.do_verbose,
            }
        for keyword in CMD_HELP:
            self._keywords[keyword] = self.do_help

    @property
    def inventory(self):
        return(self.session.inventory)

    @property
    def engine(self):
        return(self.session.engine)

    def process(self, line):
        """Runs the command line. Returns True when the session should
        end."""

        line = line.strip().lower()
        if not line:
            return(False)

        keyword = line.split()[0]
        if keyword in CMD_QUIT:
            return(True)

        handler = self._keywords.get(keyword)
        if handler is None:
            self.view.error(f'{line} is an unknown command')
            return(False)

        try:
            handler(line)
        except NotFoundError:
            self.view.error(NOT_FOUND_MESSAGE)
        except PersistenceError as e:
            logger.error(f'Unable to save settings: {e}')
            self.view.error(f'Unable to save settings: {e}')
        except errors.HDHomeRunException as e:
            logger.error(f'{keyword} failed: {e}')
            self.view.error(str(e))
        except Exception as e:
            logger.exception(f'Unexpected error running "{line}"')
            self.view.error(f'{keyword} failed: {e}')

        return(False)

    # End process

    def do_series(self, line):
        intent = command.parse(line)
        if self.session.simulate:
            self.view.notice(str(intent))

        if not intent.valid:
            self.view.error(INVALID_COMMAND_MESSAGE)
            return()

        if intent.help:
            self.view.show_series_help()
            return()

        self.inventory.refresh_series()

        series = None
        if intent.seq is not None:
            series = self.inventory.find_series(intent.seq)
            if series is None:
                raise NotFoundError(f'No series #{intent.seq}')
            self.inventory.refresh_recordings(series)

        if intent.action is None:
            if intent.seq is None and not intent.wildcard:
                self.view.show_series(self.inventory.series)
            elif intent.seq is None:
                self.inventory.refresh_all_recordings()
                for each in self.inventory.series:
                    self.show_recordings(each)
            else:
                self.show_recordings(series)
            return()

        if intent.action == ACTION_CLEAN:
            self.clean(intent)
            return()

        if intent.action not in (ACTION_KEEP, ACTION_DELETE, ACTION_PROTECT):
            self.view.error(f'{intent.action} is an unknown action. '
                            'Use ser ? for help.'
                            )
            return()

        if series is None:
            raise NotFoundError('A series sequence number is required')

        if intent.action == ACTION_KEEP:
            self.keep(series, intent)
        elif intent.action == ACTION_DELETE:
            self.delete(series, intent)
        else:
            self.protect(series, intent)

    # End do_series

    def selected(self, series, intent):
        """Recordings of the series picked by the count or wildcard"""
        return([recording for recording in list(series.recordings)
                if intent.wildcard or recording.seq == intent.count
                ])

    def keep(self, series, intent):
        if ((intent.count is None and not intent.wildcard)
                or (intent.count is not None and intent.count < 0)):
            self.view.error(KEEP_COUNT_REQUIRED_MESSAGE)
            return()

        count = None if intent.wildcard else intent.count
        self.session.store.set_keep_count(series.series_id, count)
        series.keep_count = count
        logger.info(f'Keeping {"all" if count is None else count} '
                    f'recordings of "{series.title}"'
                    )
        self.view.show_series(self.inventory.series)

    def delete(self, series, intent):
        execute = self.session.execute
        for recording in self.selected(series, intent):
            self.engine.delete(recording, execute)

        if execute:
            self.inventory.refresh_recordings(series, force=True)
            self.inventory.refresh_discovery()

        self.show_recordings(series)

    def protect(self, series, intent):
        for recording in self.selected(series, intent):
            self.engine.set_protected(recording, not recording.protected)

        self.show_recordings(series)

    def clean(self, intent):
        execute = self.session.execute
        for series in list(self.inventory.series):
            if not (intent.wildcard or series.seq == intent.seq):
                continue

            if self.engine.clean(series, execute) > 0:
                if execute:
                    self.inventory.refresh_recordings(series, force=True)
                self.show_recordings(series)
            else:
                self.view.notice(f'No recordings were removed for '
                                 f'{series.title}'
                                 )

        if execute:
            self.inventory.refresh_discovery()

    # End clean

    def show_recordings(self, series):
        self.view.show_recordings(series,
                                  self.engine.eligible_for_removal(series),
                                  self.inventory.file_size,
                                  self.session.verbose
                                  )

    def do_channels(self, line):
        self.inventory.refresh_channels(force=FORCE_FLAG in line.split())
        self.view.show_channels(self.inventory.channels)

    def do_new(self, line):
        intent = command.parse(line)
        if not intent.valid or (intent.seq is not None and intent.seq < 0):
            self.view.error(INVALID_COMMAND_MESSAGE)
            return()

        self.inventory.refresh_all_recordings()
        titles = {series.series_id: series.title
                  for series in self.inventory.series
                  }
        self.view.show_new_recordings(
            self.inventory.newest_recordings(intent.seq), titles
            )

    def do_rules(self, line):
        self.view.show_rules(self.inventory.rules(force=True))

    def do_log(self, line):
        tokens = line.split()
        entries = self.inventory.log()

        if len(tokens) > 1 and tokens[1] == SAVE_FLAG:
            self.save_log(entries)
            return()

        if len(tokens) > 1:
            entries = [entry for entry in entries if entry.matches(tokens[1])]
        self.view.show_log(entries)

    def save_log(self, entries):
        timestamp = time.strftime(LOG_FILE_TIMESTAMP_FORMAT)
        path = os.path.join(self.log_dir,
                            LOG_FILE_FORMAT.format(timestamp=timestamp)
                            )
        try:
            with open(path, 'w') as f:
                for entry in entries:
                    f.write(f'{entry}\n')
        except OSError as e:
            logger.error(f'Unable to save the log to {path}: {e.strerror}')
            self.view.error(f'Unable to save the log to {path}')
            return()

        logger.info(f'Log saved to {path}')
        self.view.notice(f'Log saved to {path}')

    def do_status(self, line):
        self.view.show_status(self.inventory.status())

    def do_info(self, line):
        self.inventory.refresh_discovery()
        self.view.show_device_info(self.session.device)

    def do_simulate(self, line):
        self.session.simulate = not self.session.simulate
        state = 'on' if self.session.simulate else 'off'
        logger.info(f'Simulation is {state}')
        self.view.notice(f'Simulation is {state}')

    def do_verbose(self, line):
        self.session.verbose = not self.session.verbose
        state = 'on' if self.session.verbose else 'off'
        self.view.notice(f'Verbose is {state}')

    def do_help(self, line):
        self.view.show_help()

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
