import pytest

from oslab.pagesim import TLB, Pager, main, run


def _store():
    return bytes(range(256)) * 256


def test_first_access_faults_then_hits_tlb():
    pager = Pager(_store())
    first = pager.access(0)
    assert first.page_fault and not first.tlb_hit
    assert first.frame == 0
    second = pager.access(10)
    assert second.tlb_hit and not second.page_fault
    assert second.frame == 0
    assert (pager.total, pager.page_faults, pager.tlb_hits) == (2, 1, 1)


def test_physical_address_and_value():
    pager = Pager(_store())
    pager.access(0)
    result = pager.access(3 * 256 + 5)
    assert result.page == 3
    assert result.offset == 5
    assert result.frame == 1
    assert result.physical == (result.frame << 8) | result.offset
    assert result.value == 5


def test_value_is_signed():
    store = bytes([0xFF]) * (256 * 256)
    assert Pager(store).access(42).value == -1


def test_address_wraps_to_sixteen_bits():
    pager = Pager(_store())
    result = pager.access(65536 + 7)
    assert result.address == 7
    assert result.page == 0


def test_fifo_replacement_evicts_oldest():
    pager = Pager(_store(), frames=2)
    for page in (0, 1, 2):
        pager.access(page * 256)
    again = pager.access(0)
    assert again.page_fault
    assert again.frame == 1
    assert pager.page_faults == 4


def test_frames_never_exceed_capacity():
    pager = Pager(_store(), frames=4)
    frames = {pager.access(page * 256).frame for page in range(40)}
    assert frames <= set(range(4))


def test_tlb_replace_overwrites_and_adds():
    tlb = TLB(4)
    tlb.add(1, 10)
    tlb.replace(1, 2, 20)
    assert tlb.lookup(1) is None
    assert tlb.lookup(2) == 20


def test_tlb_evicts_oldest_entry():
    tlb = TLB(2)
    tlb.add(1, 1)
    tlb.add(2, 2)
    tlb.add(3, 3)
    assert tlb.lookup(1) is None
    assert tlb.lookup(3) == 3


def test_invalid_frame_count():
    with pytest.raises(ValueError):
        Pager(_store(), frames=0)


def test_run_report_and_statistics():
    lines = list(run(["0\n", "1\n"], _store()))
    assert lines[0] == "Virtual address: 0 Physical address = 0 Value=0"
    assert lines[1] == "Virtual address: 1 Physical address = 1 Value=1"
    assert lines[-3:] == [
        "Number of Translated Addresses = 2",
        "Page Faults = 1",
        "TLB Hits = 1",
    ]


def test_main_reads_files(tmp_path, capsys):
    store = tmp_path / "store.bin"
    store.write_bytes(_store())
    addresses = tmp_path / "addresses.txt"
    addresses.write_text("0\n256\n")
    assert main([str(store), str(addresses)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-2] == "Page Faults = 2"


def test_main_missing_store(tmp_path):
    assert main([str(tmp_path / "missing.bin"), str(tmp_path / "a.txt")]) == 1