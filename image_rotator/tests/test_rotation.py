import threading

import pytest

from image_rotator.services.images import EmptyImageSetError, LoadedImage
from image_rotator.services.rotation import Rotator


def _images(*names):
    return [LoadedImage(n, n.encode()) for n in names]


def test_sequence_wraps_around():
    rotator = Rotator(_images('a', 'b', 'c'))
    served = [rotator.next_image().name for _ in range(7)]
    assert served == ['a', 'b', 'c', 'a', 'b', 'c', 'a']
    assert rotator.served == 7


def test_single_image_always_served():
    rotator = Rotator(_images('only'))
    assert {rotator.next_image().name for _ in range(5)} == {'only'}


def test_empty_rejected():
    with pytest.raises(EmptyImageSetError):
        Rotator([])


def test_image_set_is_immutable_copy():
    source = _images('a', 'b')
    rotator = Rotator(source)
    source.append(LoadedImage('c', b'c'))
    assert len(rotator) == 2
    assert isinstance(rotator.images, tuple)


def test_concurrent_requests_get_distinct_indices():
    rotator = Rotator(_images('a', 'b', 'c', 'd'))
    per_thread = 500
    results = []
    lock = threading.Lock()

    def worker():
        seen = [rotator.next_image().name for _ in range(per_thread)]
        with lock:
            results.extend(seen)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert rotator.served == 8 * per_thread
    # every counter value was handed out once, so each image got an equal share
    for name in 'abcd':
        assert results.count(name) == 8 * per_thread // 4
