from barstat import cpu


def _write_stat(path, values):
    path.write_text("cpu  " + " ".join(str(v) for v in values) + " 0 0 0\ncpu0 1 2 3\n")


def test_first_sample_is_none(tmp_path):
    stat = tmp_path / "stat"
    _write_stat(stat, [100, 0, 100, 800, 0, 0, 0])
    assert cpu.CpuUsage(str(stat)).sample() is None


def test_second_sample_gives_percentage(tmp_path):
    stat = tmp_path / "stat"
    usage = cpu.CpuUsage(str(stat))
    _write_stat(stat, [100, 0, 100, 800, 0, 0, 0])
    usage.sample()
    _write_stat(stat, [200, 0, 200, 1600, 0, 0, 0])
    assert usage.sample() == "20"


def test_unchanged_counters_give_none(tmp_path):
    stat = tmp_path / "stat"
    usage = cpu.CpuUsage(str(stat))
    _write_stat(stat, [100, 0, 100, 800, 0, 0, 0])
    usage.sample()
    assert usage.sample() is None


def test_fully_idle_interval_is_zero(tmp_path):
    stat = tmp_path / "stat"
    usage = cpu.CpuUsage(str(stat))
    _write_stat(stat, [100, 0, 100, 800, 0, 0, 0])
    usage.sample()
    _write_stat(stat, [100, 0, 100, 900, 0, 0, 0])
    assert usage.sample() == "0"


def test_missing_stat_file(tmp_path):
    assert cpu.CpuUsage(str(tmp_path / "absent")).sample() is None


def test_malformed_stat_file(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu 1 2\n")
    assert cpu.CpuUsage(str(stat)).sample() is None


def test_cpu_freq(tmp_path, monkeypatch):
    freq = tmp_path / "scaling_cur_freq"
    freq.write_text("1500000\n")
    monkeypatch.setattr(cpu, "SCALING_CUR_FREQ", str(freq))
    assert cpu.cpu_freq() == "1.5 G"


def test_cpu_freq_missing(tmp_path, monkeypatch):
    monkeypatch.setattr(cpu, "SCALING_CUR_FREQ", str(tmp_path / "absent"))
    assert cpu.cpu_freq() is None