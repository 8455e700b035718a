#!/usr/bin/env python

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


import io

import pytest
from rich.console import Console

from hdhr_dvr_manager.hdhr import errors
from hdhr_dvr_manager.interpreter import Interpreter
from hdhr_dvr_manager.presentation import ConsoleView
from hdhr_dvr_manager.store import PersistenceError


@pytest.fixture
def interpreter(session, tmp_path):
    view = ConsoleView(Console(file=io.StringIO(), width=200))
    return(Interpreter(session, view, log_dir=str(tmp_path)))


def output(interpreter):
    return(interpreter.view.console.file.getvalue())


class TestKeywords:

    def test_quit(self, interpreter):

        assert interpreter.process('quit')
        assert interpreter.process('Q')
        assert not interpreter.process('')
        assert not interpreter.process('ser')

    def test_unknown_command(self, interpreter):

        interpreter.process('bogus 1 2')
        assert 'bogus 1 2 is an unknown command' in output(interpreter)

    def test_help(self, interpreter):

        interpreter.process('?')
        assert 'Shows this help' in output(interpreter)

    def test_simulate_toggle(self, interpreter, session):

        interpreter.process('sim')
        assert session.simulate
        assert not session.execute
        interpreter.process('sim')
        assert not session.simulate

    def test_verbose_toggle(self, interpreter, session, device):

        device.episodes[next(iter(device.episodes))][0]['Synopsis'] = \
            'Three contestants compete.'
        session.inventory.refresh_recordings(
            session.inventory.find_series(1), force=True)
        interpreter.process('ser 1')
        assert 'Three contestants compete.' not in output(interpreter)
        interpreter.process('ver')
        assert session.verbose
        interpreter.process('ser 1')
        assert 'Three contestants compete.' in output(interpreter)

    def test_new(self, interpreter):

        interpreter.process('new 2')
        text = output(interpreter)
        assert 'Newest 2 Recordings' in text
        assert 'Episode EP01' in text
        assert 'Episode EP11' in text
        assert 'Episode EP02' not in text

    def test_new_rejects_negative_count(self, interpreter):

        interpreter.process('new -1')
        text = output(interpreter)
        assert 'Newest' not in text
        assert 'Episode EP' not in text
        assert 'Invalid command' in text

    def test_channels(self, interpreter, device):

        interpreter.process('chan')
        interpreter.process('chan')
        assert device.calls['channels'] == 1
        interpreter.process('chan -f')
        assert device.calls['channels'] == 2
        assert 'WCBS-HD' in output(interpreter)
        assert 'AC3/MPEG2' in output(interpreter)

    def test_rules(self, interpreter):

        interpreter.process('rules')
        text = output(interpreter)
        assert text.index('NOVA') < text.index('Jeopardy!')

    def test_status(self, interpreter):

        interpreter.process('status')
        text = output(interpreter)
        assert 'tuner0' in text
        assert '13.1' in text
        assert 'Living Room' in text
        assert 'WNET' in text

    def test_info(self, interpreter, device):

        interpreter.process('info')
        assert device.calls['refresh'] == 1
        text = output(interpreter)
        assert 'HDVR-4US-1TB' in text
        assert '834.23 GB' in text

    def test_log_filter(self, interpreter):

        interpreter.process('log TUNER')
        text = output(interpreter)
        assert 'Tuner 0 lock acquired' in text
        assert 'Recording started' not in text

    def test_log_save(self, interpreter, tmp_path):

        interpreter.process('log -save')
        saved = list(tmp_path.glob('log-*.txt'))
        assert len(saved) == 1
        assert saved[0].read_text() == ('20200913-12:26:40 Recording started: '
                                        'NOVA\n'
                                        '20200913-12:27:40 Tuner 0 lock '
                                        'acquired\n')
        assert 'Log saved to' in output(interpreter)

    def test_remote_failure_is_reported(self, interpreter, device):

        def fail():
            raise errors.RemoteFailure('http://192.168.1.104:80/status.json',
                                       'timed out')

        device.status = fail
        assert not interpreter.process('status')
        assert 'timed out' in output(interpreter)


class TestSeries:

    def test_list_series(self, interpreter):

        interpreter.process('ser')
        text = output(interpreter)
        assert 'Jeopardy!' in text
        assert 'C197235EN' in text

    def test_list_recordings(self, interpreter):

        interpreter.process('ser 2')
        text = output(interpreter)
        assert 'Episode EP11' in text
        assert 'Episode EP01' not in text

    def test_list_all_recordings(self, interpreter):

        interpreter.process('ser *')
        text = output(interpreter)
        assert 'Episode EP04' in text
        assert 'Episode EP12' in text

    def test_help(self, interpreter):

        interpreter.process('ser ?')
        assert 'Series Help' in output(interpreter)

    def test_invalid(self, interpreter):

        interpreter.process('ser x')
        assert 'Invalid command. Use ser ? for help.' in output(interpreter)

    def test_not_found(self, interpreter, device):

        interpreter.process('ser 9 del *')
        assert 'Series matching that sequence was not found.' in \
            output(interpreter)
        assert 'delete_recording' not in device.calls

    def test_action_without_series(self, interpreter, device):

        interpreter.process('ser * del 1')
        assert 'Series matching that sequence was not found.' in \
            output(interpreter)
        assert 'delete_recording' not in device.calls

    def test_unknown_action(self, interpreter, store):

        interpreter.process('ser 2 frobnicate 1')
        assert 'frobnicate is an unknown action' in output(interpreter)
        assert store.keeps == {}

    def test_keep(self, interpreter, session, store):

        interpreter.process('ser 1 keep 2')
        assert store.keep_count('C184056EN') == 2
        assert session.inventory.find_series(1).keep_count == 2

    def test_keep_all(self, interpreter, session, store):

        interpreter.process('ser 1 keep 2')
        interpreter.process('ser 1 keep *')
        assert store.keeps == {}
        assert session.inventory.find_series(1).keep_count is None

    def test_keep_requires_count(self, interpreter, store):

        interpreter.process('ser 1 keep')
        assert 'A valid number is required after keep' in output(interpreter)
        assert store.keeps == {}

    def test_keep_rejects_negative_count(self, interpreter, session, store):

        interpreter.process('ser 1 keep -1')
        assert 'A valid number is required after keep' in output(interpreter)
        assert store.keeps == {}
        assert session.inventory.find_series(1).keep_count is None

    def test_keep_failed_write_not_applied(self, interpreter, session, store,
                                           monkeypatch):

        def fail(*args, **kwargs):
            raise OSError(28, 'No space left on device')

        monkeypatch.setattr('hdhr_dvr_manager.store.json.dump', fail)
        assert not interpreter.process('ser 1 keep 2')
        assert 'Unable to save settings' in output(interpreter)
        monkeypatch.undo()
        session.inventory.refresh_series(force=True)
        assert session.inventory.find_series(1).keep_count is None
        assert store.keep_count('C184056EN') is None

    def test_keep_persistence_failure(self, interpreter, session, store,
                                      monkeypatch):

        def fail(series_id, count):
            raise PersistenceError('Unable to write: disk full')

        monkeypatch.setattr(store, 'set_keep_count', fail)
        assert not interpreter.process('ser 1 keep 2')
        assert 'disk full' in output(interpreter)
        assert session.inventory.find_series(1).keep_count is None

    def test_delete_one(self, interpreter, session, device):

        interpreter.process('ser 1 del 2')
        assert device.deleted == [
            'http://192.168.1.104:80/recorded/cmd?id=EP02']
        series = session.inventory.find_series(1)
        assert [r.program_id for r in series.recordings] == ['EP01', 'EP03',
                                                             'EP04']
        assert [r.seq for r in series.recordings] == [1, 2, 3]
        assert device.calls['refresh'] == 1

    def test_delete_all_simulated(self, interpreter, session, device):

        interpreter.process('sim')
        interpreter.process('ser 2 del *')
        series = session.inventory.find_series(2)
        assert all(r.deleted for r in series.recordings)
        assert 'delete_recording' not in device.calls
        assert 'refresh' not in device.calls
        assert 'Obj [ser]  Seq [2]  All [True] Action [del]' in \
            output(interpreter)

    def test_delete_ignores_protection(self, interpreter, session, device):

        interpreter.process('ser 2 protect 1')
        interpreter.process('ser 2 del 1')
        assert device.deleted == [
            'http://192.168.1.104:80/recorded/cmd?id=EP11']

    def test_protect_toggles(self, interpreter, session, store):

        interpreter.process('ser 1 protect 3')
        assert store.protects == {'EP03'}
        assert session.inventory.find_series(1).recordings[2].protected
        interpreter.process('ser 1 protect 3')
        assert store.protects == set()

    def test_protect_all(self, interpreter, store):

        interpreter.process('ser 2 protect *')
        assert store.protects == {'EP11', 'EP12'}

    def test_clean_all(self, interpreter, session, device):

        interpreter.process('ser 1 keep 1')
        interpreter.process('ser 1 protect 2')
        interpreter.process('ser * clean')
        assert sorted(device.deleted) == [
            'http://192.168.1.104:80/recorded/cmd?id=EP03',
            'http://192.168.1.104:80/recorded/cmd?id=EP04']
        assert [r.program_id for r
                in session.inventory.find_series(1).recordings] == ['EP01',
                                                                    'EP02']
        assert 'No recordings were removed for NOVA' in output(interpreter)
        assert device.calls['refresh'] == 1

    def test_clean_one_simulated(self, interpreter, session, device):

        interpreter.process('ser 2 keep 0')
        interpreter.process('sim')
        interpreter.process('ser 2 clean')
        assert all(r.deleted for r
                   in session.inventory.find_series(2).recordings)
        assert not any(r.deleted for r
                       in session.inventory.find_series(1).recordings)
        assert 'delete_recording' not in device.calls
        assert 'refresh' not in device.calls

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
