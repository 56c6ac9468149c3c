# Splits a sense inventory into one feature file per word sense
import os

from inventory_splitter.common import info, warn
from inventory_splitter.global_variables import col_sep, list_sep, score_sep, sense_infix, min_feature_len, \
    max_feature_num, encoding, preview_len, progress_every

# Downstream consumers read feature names as pattern fragments
unsafe_chars = set('+/\\$^.?()[]{}|*')


class SplitterError(Exception):
    pass


class OutputWriteError(SplitterError):
    pass


def clean_feature(feature):
    if any(c in unsafe_chars for c in feature):
        return ''
    return feature.strip().replace(' ', '_')


def sense_file_name(word, sense_id):
    return f'{word}{sense_infix}{sense_id}'


class InventorySplitter:
    """
    Turns lines of the form word<TAB>sense_id<TAB>cluster<TAB>features into
    files named word#n#sense_id, where cluster and features are lists of
    name:score pairs joined by two spaces. Cluster words are written first and
    win over features with the same name.
    """

    def __init__(self, stopwords=None, max_feature_num=max_feature_num, verbose=False):
        if max_feature_num <= 0:
            raise ValueError(f'max_feature_num must be positive, got {max_feature_num}')
        self.stopwords = set(stopwords) if stopwords is not None else set()
        self.max_feature_num = max_feature_num
        self.verbose = verbose

    def accept_feature(self, feature_name):
        return len(feature_name) >= min_feature_len and feature_name not in self.stopwords

    def parse_features(self, features_str):
        features = {}
        for entry in features_str.strip().split(list_sep):
            # Trailing empty pieces do not count, so 'name:' has a single piece
            name_score_pair = entry.strip().rstrip(score_sep).split(score_sep)
            if len(name_score_pair) != 2:
                if self.verbose:
                    warn(f"Cannot parse feature '{entry}'")
                continue

            feature_name = clean_feature(name_score_pair[0])
            feature_score = name_score_pair[1].strip()

            if self.accept_feature(feature_name):
                features[feature_name] = feature_score

            # Not conditional on the cased name being accepted
            lower_name = feature_name.lower()
            if lower_name != feature_name and self.accept_feature(lower_name):
                features[lower_name] = feature_score

        return features

    def merge_features(self, clusters, features):
        merged = dict(clusters)
        for feature_name, feature_score in features.items():
            if feature_name not in merged:
                merged[feature_name] = feature_score
            elif self.verbose:
                warn(f"Feature '{feature_name}' already in the collection: now '{merged[feature_name]}', "
                     f"proposed '{feature_score}'.")
        return merged

    def parse_line(self, line):
        """
        Returns (word, sense_id, features) for a well formed line, None otherwise.
        """
        fields = line.split(col_sep)
        if len(fields) != 4:
            warn(f"Cannot parse the line with {len(fields)} fields: '{line[:preview_len]}'")
            return None

        word = fields[0].strip()
        sense_id = fields[1].strip()
        cluster_words = self.parse_features(fields[2])
        features = self.parse_features(fields[3])
        return word, sense_id, self.merge_features(cluster_words, features)

    def write_sense(self, output_dir, word, sense_id, cluster_and_features):
        path = os.path.join(output_dir, sense_file_name(word, sense_id))
        try:
            with open(path, 'w', encoding=encoding) as sense_file:
                sense_file.write('\n')  # The evaluation script expects a leading blank line
                for feature_num, (feature_name, feature_score) in enumerate(cluster_and_features.items()):
                    if feature_num >= self.max_feature_num:
                        break
                    if len(feature_name) >= min_feature_len:
                        sense_file.write(f'{feature_name} {feature_score}\n')
                    elif self.verbose:
                        warn(f"Cannot write feature '{feature_name}'")
        except OSError as e:
            raise OutputWriteError(f"Cannot write sense file '{path}': {e}") from e
        return path

    def split_inventory(self, input_file, output_dir):
        try:
            os.makedirs(output_dir, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(f"Cannot create output directory '{output_dir}': {e}") from e

        total_lines = 0
        wrong_lines = 0
        written_files = 0

        with open(input_file, 'r', encoding=encoding) as inventory:
            for raw_line in inventory:
                line = raw_line.strip()
                if not line:
                    continue

                total_lines += 1
                if total_lines % progress_every == 0:
                    info(f'On line {total_lines}')

                parsed = self.parse_line(line)
                if parsed is None:
                    wrong_lines += 1
                    continue

                word, sense_id, cluster_and_features = parsed
                self.write_sense(output_dir, word, sense_id, cluster_and_features)
                written_files += 1

        wrong_ratio = wrong_lines / total_lines if total_lines > 0 else 0.
        info(f'Wrote {written_files} sense files to {output_dir}')
        return {
            'total_lines': total_lines,
            'wrong_lines': wrong_lines,
            'written_files': written_files,
            'wrong_ratio': wrong_ratio
        }


def format_summary(summary):
    return f"# wrong lines: {summary['wrong_ratio']:.3f} ({summary['wrong_lines']} of {summary['total_lines']})"
