from heavyrmsd.core.domain.models.atom import Atom
from heavyrmsd.core.domain.models.bond import Bond, BondType
from heavyrmsd.core.domain.models.molecular_graph import MolecularGraph
from heavyrmsd.core.services.canonicalizer import canonicalize


def test_hydrogens_removed_and_bonds_renumbered(phenol_with_hydrogens):
    canonical = canonicalize(phenol_with_hydrogens)

    assert canonical.num_atoms == 7
    assert all(atom.element != "H" for atom in canonical.atoms)
    assert canonical.num_bonds == 7
    assert all(
        0 <= bond.atom1_index < 7 and 0 <= bond.atom2_index < 7
        for bond in canonical.bonds
    )
    assert canonical.atoms[6].element == "O"
    assert canonical.title == "phenol"


def test_input_is_left_untouched(phenol_with_hydrogens):
    before = (phenol_with_hydrogens.num_atoms, phenol_with_hydrogens.num_bonds)
    canonicalize(phenol_with_hydrogens)
    assert (phenol_with_hydrogens.num_atoms, phenol_with_hydrogens.num_bonds) == before


def test_flags_and_orders_are_normalized():
    atoms = [
        Atom("c", (0.0, 0.0, 0.0), aromatic=True, in_ring=True),
        Atom("N", (1.3, 0.0, 0.0), aromatic=False, in_ring=False),
        Atom("D", (1.8, 0.9, 0.0)),
    ]
    bonds = [
        Bond(0, 1, bond_type=BondType.AROMATIC, bond_order=1.5, aromatic=True),
        Bond(1, 0, bond_type=BondType.DOUBLE, bond_order=2.0),
        Bond(1, 2),
    ]
    canonical = canonicalize(MolecularGraph(atoms, bonds, title="x"))

    assert [atom.element for atom in canonical.atoms] == ["C", "N"]
    assert all(not atom.aromatic and atom.in_ring for atom in canonical.atoms)
    # The duplicated pair collapses to one single bond
    assert len(canonical.bonds) == 1
    bond = canonical.bonds[0]
    assert bond.bond_type is BondType.SINGLE
    assert bond.bond_order == 1.0
    assert not bond.aromatic and bond.in_ring


def test_empty_molecule():
    canonical = canonicalize(MolecularGraph(title="nothing"))
    assert canonical.is_empty()
    assert canonical.title == "nothing"
