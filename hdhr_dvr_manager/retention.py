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

from hdhr_dvr_manager.hdhr import errors
from hdhr_dvr_manager.util import localtime

logger = logging.getLogger(__name__)


def describe(recording):

    description = f'#{recording.seq} "{recording.series_title}'
    if recording.episode_title:
        description += f': {recording.episode_title}'
    description += '"'
    if recording.start_time is not None:
        description += f', recorded {localtime(recording.start_time)}'
    return(description)

# End describe


class RetentionEngine:

    def __init__(self, inventory, store, device):
        self.inventory = inventory
        self.store = store
        self.device = device

    def eligible_for_removal(self, series):
        """Recordings of the series beyond its keep count.

        Recordings are taken in the order the device reported them.
        Protected recordings neither take up one of the kept places nor are
        ever eligible themselves.
        """

        if series.keep_count is None:
            return([])

        eligible = []
        unprotected_count = 0
        for recording in series.recordings:
            if recording.protected:
                continue
            unprotected_count += 1
            if unprotected_count > series.keep_count:
                eligible.append(recording)
        return(eligible)

    def clean(self, series, execute):
        """Deletes the recordings of the series beyond its keep count.
        Returns the number of recordings removed."""

        if not series.recordings:
            self.inventory.refresh_recordings(series)

        if series.keep_count is None:
            logger.debug(f'Keeping all recordings of "{series.title}"')
            return(0)

        removed = 0
        for recording in self.eligible_for_removal(series):
            if recording.deleted:
                continue
            if self.delete(recording, execute,
                           reason=(f'because only {series.keep_count} '
                                   'should be kept'
                                   )):
                removed += 1
        return(removed)

    def delete(self, recording, execute, reason=''):
        """Deletes one recording. Returns True if it was deleted (or would
        have been, when not executing)."""

        msg = f'Deleting {describe(recording)}'
        if reason:
            msg += f', {reason}'

        if not execute:
            logger.warning(f'{msg} (simulated, nothing was deleted)')
            recording.deleted = True
            return(True)

        logger.info(msg)
        try:
            deleted = self.device.delete_recording(recording.command_url)
        except errors.RemoteFailure as e:
            logger.error(f'Unable to delete {describe(recording)}: {e}')
            return(False)

        if not deleted:
            logger.error(f'Device refused to delete {describe(recording)}')
            return(False)

        recording.deleted = True
        return(True)

    def set_protected(self, recording, want_protected):
        self.store.toggle_protect(recording.program_id, want_protected)
        recording.protected = want_protected
        logger.info(f"{'Protected' if want_protected else 'Unprotected'} "
                    f'{describe(recording)}'
                    )

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
