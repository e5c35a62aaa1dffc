from blocksynth.note_logger import NoteLogger


class Recorder:
    def __init__(self):
        self.events = []

    def notes_started(self, note_ids):
        self.events.append(("started", list(note_ids)))

    def notes_ended(self, note_ids):
        self.events.append(("ended", list(note_ids)))


def test_first_notes_start():
    recorder = Recorder()
    logger = NoteLogger(recorder)
    changes = logger.log([1, 2])
    assert changes.started == [1, 2]
    assert changes.ended == []
    assert recorder.events == [("started", [1, 2])]


def test_changes_report_started_then_ended():
    recorder = Recorder()
    logger = NoteLogger(recorder)
    logger.log([1, 2])
    logger.log([2, 3])
    assert recorder.events[1:] == [("started", [3]), ("ended", [1])]
    assert logger.active_notes == [2, 3]


def test_all_notes_released():
    recorder = Recorder()
    logger = NoteLogger(recorder)
    logger.log([4, 7])
    changes = logger.log([])
    assert changes.ended == [4, 7]
    assert recorder.events[-1] == ("ended", [4, 7])
    assert logger.active_notes == []


def test_unchanged_notes_are_silent():
    recorder = Recorder()
    logger = NoteLogger(recorder)
    logger.log([9])
    changes = logger.log([9])
    assert changes.started == [] and changes.ended == []
    assert recorder.events == [("started", [9])]


def test_duplicate_ids_start_once():
    logger = NoteLogger()
    changes = logger.log([5, 5])
    assert changes.started == [5]
    assert logger.active_notes == [5]


def test_generator_input():
    logger = NoteLogger()
    changes = logger.log(note for note in (3, 1))
    assert changes.started == [3, 1]