import getopt
import os
import sys

from . import log
from .dot import write_dot
from .exception import BSTError, ParseError
from .tree import bstree

import bstengine

DEFAULT_KEYS = [15, 6, 18, 17, 20, 3, 7, 2, 4, 13, 9]
DEFAULT_SEARCH = [15, 9, 22, 4, 100]
DEFAULT_DELETE = [4, 18, 6, 15, 99]

def _parse_key(s):
    try:
        return int(s, 0)
    except ValueError:
        raise ParseError("not an integer key: `", s, "'")

def _keystr(node):
    return "not found" if node is None else str(node.key)


class Walkthrough(object):
    """Builds a tree and runs every query and deletion on it, reporting the
    results to out."""

    def __init__(self, options, out=None):
        self.options = options
        self.out = out if out is not None else sys.stdout
        self.root = None

    def _write(self, *msg):
        self.out.write(''.join(map(str, msg)) + '\n')

    def _heading(self, title):
        self._write("\n--- ", title, " ---")

    def _snapshot(self, step):
        if self.options['output_dir'] is None:
            return
        filename = os.path.join(self.options['output_dir'],
                                "bst_graph_" + step + ".dot")
        self._write("generating tree graph: ", filename)
        write_dot(self.root, filename,
                  show_parents=self.options['show_parents'])

    def build(self):
        self._heading("Initial Tree Creation")
        for k in self.options['keys']:
            self.root = bstree.insert(self.root, k)
        self._write("in-order keys: ", self._inorder_str())
        self._snapshot("initial")

    def searches(self):
        self._heading("Tree Search")
        for k in self.options['search']:
            node = bstree.search(self.root, k)
            self._write("tree search result of key ", k, " is ",
                        "not found" if node is None else "found")

    def extremes(self):
        self._heading("Minimum/Maximum")
        if self.root is None:
            self._write("tree is empty")
            return
        min_node = bstree.minimum(self.root)
        max_node = bstree.maximum(self.root)
        self._write("minimum result ", min_node.key)
        self._write("maximum result ", max_node.key)

        self._heading("Get Root")
        self._write("root node from max_node ", bstree.root_of(max_node).key)
        self._write("root node from min_node ", bstree.root_of(min_node).key)

    def successors(self):
        self._heading("Successor")
        for k in sorted(set(self.options['keys'])):
            node = bstree.search(self.root, k)
            if node is None:
                self._write("node with key of ", k,
                            " does not exist, failed to get successor")
                continue
            self._write("successor of node (", k, ") is ",
                        _keystr(bstree.successor(node)))

    def duplicate_insert(self):
        if self.root is None:
            return
        k = self.root.key
        self._heading("Insert (Duplicate)")
        self._write("inserting ", k, " (already exists)...")
        self.root = bstree.insert(self.root, k)
        self._snapshot("insert_" + str(k))

    def deletions(self):
        self._heading("Delete")
        for k in self.options['delete']:
            node = bstree.search(self.root, k)
            if node is None:
                self._write("node with key ", k, " not found, cannot delete")
                continue
            self.root = bstree.delete(self.root, node)
            if self.root is None:
                self._write("deleted ", k, ", tree is now empty")
            else:
                self._write("deleted ", k, ", root is now ", self.root.key)
            self._snapshot("delete_" + str(k))

    def final(self):
        self._heading("Final Tree State")
        self._write("in-order keys: ", self._inorder_str())
        self._snapshot("final")

    def _inorder_str(self):
        keys = []
        bstree.inorder(self.root, lambda n: keys.append(str(n.key)))
        return ' '.join(keys) if keys else "(empty)"

    def run(self):
        self.build()
        self.searches()
        self.extremes()
        self.successors()
        self.duplicate_insert()
        self.deletions()
        self.final()
        return self.root


def demo_main(argv):
    log.logger = log.Logger()
    try:
        options = parse_arguments(argv)
    except BSTError as e:
        log.fatal_exit(2, e)

    log.info("bstdemo {}: building tree from {:d} keys".format(
        bstengine.__version__, len(options['keys'])))
    if options['output_dir'] is not None and \
            not os.path.isdir(options['output_dir']):
        try:
            os.makedirs(options['output_dir'])
        except OSError as e:
            log.fatal("unable to create output directory: ", str(e))

    try:
        Walkthrough(options).run()
    except BSTError as e:
        log.fatal(e)
    return 0

def default_options():
    opts = {
            'keys' : list(DEFAULT_KEYS),
            'search' : list(DEFAULT_SEARCH),
            'delete' : list(DEFAULT_DELETE),
            'output_dir' : None,
            'show_parents' : False,
            }
    return opts

def invalid_argument(opt, arg):
    log.fatal_exit(2, "invalid " + opt + " argument `" + str(arg) + "'")

def parse_arguments(argv):
    long_opts = [
            'color=',
            'delete=',
            'help',
            'output-dir=',
            'quiet',
            'search=',
            'show-parents',
            'verbose',
            'version'
    ]
    options = default_options()
    search = []
    delete = []
    opts = 'd:ho:qs:v'
    try:
        opts, args = getopt.gnu_getopt(argv[1:], opts, long_opts)
    except getopt.GetoptError as err:
        log.fatal_exit(2, err, "\n", "Try `",
                str(os.path.basename(argv[0])),
                " --help' for more information.")

    for opt, arg in opts:
        if opt in ('-h', '--help'):
            usage(os.path.basename(argv[0]))
            sys.exit(0)

        elif opt in ('-s', '--search'):
            try:
                search.append(_parse_key(arg))
            except ParseError:
                invalid_argument(opt, arg)

        elif opt in ('-d', '--delete'):
            try:
                delete.append(_parse_key(arg))
            except ParseError:
                invalid_argument(opt, arg)

        elif opt in ('-o', '--output-dir'):
            options['output_dir'] = arg

        elif opt in ('--show-parents',):
            options['show_parents'] = True

        elif opt in ('-q', '--quiet'):
            log.logger.loglevel = log.LOG_ERROR

        elif opt in ('-v', '--verbose'):
            log.logger.loglevel += 1

        elif opt in ('--color',):
            try:
                log.logger.set_colors(arg)
            except ValueError:
                invalid_argument(opt, arg)

        elif opt in ('--version',):
            version()
            sys.exit(0)

        else:
            invalid_argument(opt, "")

    if search:
        options['search'] = search
    if delete:
        options['delete'] = delete
    if args:
        options['keys'] = [_parse_key(a) for a in args]

    return options

def version():
    sys.stdout.write("bstdemo " + bstengine.__version__ + "\n")


def usage(program_name):
    def_opts = default_options()
    sys.stdout.write(
            'Usage: {0:s} [option]... [--] [key]...'.format(program_name))
    sys.stdout.write(
'''
Build a binary search tree from the given keys, query it and delete from it

Options:
      --version              show program's version number and exit
  -h, --help                 show this help message and exit
  -v, --verbose              increase verbosity level (use multiple times for
                               greater effect)
  -q, --quiet                only show errors
      --color=WHEN           colorize output; WHEN can be 'auto' (default),
                               'always' or 'never'.

Walkthrough:
  -s, --search=KEY           search for KEY (may be given multiple times,
                               default {search:s})
  -d, --delete=KEY           delete KEY (may be given multiple times,
                               default {delete:s})
  -o, --output-dir=DIR       write a graphviz dot file to DIR after building
                               the tree and after every change
      --show-parents         include parent links in the dot files

Keys default to {keys:s}.
Use `--' before the first key if it is negative.
'''.format(keys=' '.join(map(str, def_opts['keys'])),
        search=','.join(map(str, def_opts['search'])),
        delete=','.join(map(str, def_opts['delete'])))
    )

def main():
    try:
        sys.exit(demo_main(sys.argv))
    except KeyboardInterrupt:
        sys.stderr.write("\nreceived SIGINT, terminating\n")
        sys.exit(3)
