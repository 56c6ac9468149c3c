import pytest

from inventory_splitter.global_variables import stopwords_env_var
from inventory_splitter.stages import s01_split_inventory
from inventory_splitter.stages.s01_split_inventory import run, positive_int


@pytest.fixture
def inventory(tmp_path):
    inventory = tmp_path / 'inventory.csv'
    inventory.write_text('cat\t1\tfeline:0.9  the:0.5\tdomestic:0.7  pet:0.3\n'
                         'broken line\n', encoding='utf-8')
    return inventory


@pytest.fixture
def stopwords(tmp_path):
    stopwords = tmp_path / 'stopwords.csv'
    stopwords.write_text('the\n', encoding='utf-8')
    return stopwords


def test_run_defaults(tmp_path, inventory, capsys, monkeypatch):
    monkeypatch.delenv(stopwords_env_var, raising=False)
    output_dir = tmp_path / 'out'

    summary = run([str(inventory), str(output_dir), '--stopwords', str(tmp_path / 'missing.csv')])

    assert (output_dir / 'cat#n#1').read_text(encoding='utf-8') == '\nfeline 0.9\nthe 0.5\ndomestic 0.7\npet 0.3\n'
    assert summary['wrong_lines'] == 1
    assert capsys.readouterr().out.strip() == '# wrong lines: 0.500 (1 of 2)'


def test_run_stopwords_and_max_features(tmp_path, inventory, stopwords):
    output_dir = tmp_path / 'out'

    run([str(inventory), str(output_dir), '2', '--stopwords', str(stopwords)])

    assert (output_dir / 'cat#n#1').read_text(encoding='utf-8') == '\nfeline 0.9\ndomestic 0.7\n'


def test_run_stopwords_from_environment(tmp_path, inventory, stopwords, monkeypatch):
    monkeypatch.setenv(stopwords_env_var, str(stopwords))
    output_dir = tmp_path / 'out'

    run([str(inventory), str(output_dir)])

    assert 'the 0.5' not in (output_dir / 'cat#n#1').read_text(encoding='utf-8')


def test_run_nltk_stopwords(tmp_path, inventory, monkeypatch):
    monkeypatch.setattr(s01_split_inventory, 'load_nltk_stopwords', lambda language: {'pet'})
    output_dir = tmp_path / 'out'

    run([str(inventory), str(output_dir), '--stopwords', str(tmp_path / 'missing.csv'), '--nltk-stopwords', 'english'])

    assert (output_dir / 'cat#n#1').read_text(encoding='utf-8') == '\nfeline 0.9\nthe 0.5\ndomestic 0.7\n'


@pytest.mark.parametrize('argv', [[], ['only_input'], ['a', 'b', '10', 'extra']])
def test_run_wrong_arity_prints_usage(argv, capsys):
    with pytest.raises(SystemExit) as exit_info:
        run(argv)

    assert exit_info.value.code == 2
    assert 'usage: split-inventory' in capsys.readouterr().err


@pytest.mark.parametrize('value', ['ten', '0', '-5'])
def test_run_rejects_bad_max_feature_num(tmp_path, value):
    with pytest.raises(SystemExit):
        run([str(tmp_path / 'inventory.csv'), str(tmp_path / 'out'), value])


def test_positive_int():
    assert positive_int('25') == 25
